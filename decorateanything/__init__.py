from . import _decorator
from . import _forward

Decorator = _decorator.Decorator
InvalidComponent = _decorator.InvalidComponent
unwrap = _decorator.unwrap

get = _forward.get
set = _forward.set  # noqa
has = _forward.has
unset = _forward.unset
invoke = _forward.invoke
