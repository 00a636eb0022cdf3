"""Provides the `Decorator` base class that wraps any object and forwards to it.

A concrete decorator subclasses `Decorator`, optionally names the component type it accepts, and overrides only the
members it wants to change. Everything else is forwarded to the wrapped component.

Example:

    class Text:
        def __init__(self, text: str) -> None:
            self.text = text

        def draw(self) -> None:
            print(self.text, end='')


    class Bold(decorateanything.Decorator[Text]):
        def draw(self) -> None:
            print('<b>', end='')
            self.__wrapped__.draw()
            print('</b>', end='')


    class Italic(decorateanything.Decorator, component_t=Text):
        def draw(self) -> None:
            print('<i>', end='')
            decorateanything.invoke(self, 'draw')
            print('</i>', end='')


    Italic(Bold(Text('Hello World'))).draw()  # <i><b>Hello World</b></i>

"""
from __future__ import annotations

import abc
import annotated_types
import builtins
import copy
import logging
import types
import typing

logger = logging.getLogger(__name__)

type Name = typing.Annotated[str, annotated_types.Predicate(str.isidentifier)]  # noqa

_primitive_ts = (types.NoneType, bool, int, float, complex, str, bytes)


class Exception(builtins.Exception):  # noqa
    ...


class InvalidComponent(Exception, TypeError):
    """Raised when a decorator is given a component it does not accept."""

    def __init__(self, *, decorator: type[Decorator], expected: str, given: str) -> None:
        if expected == 'object':
            message = f'{decorator.__qualname__}() argument must be an object, {given} given'
        else:
            message = (
                f'{decorator.__qualname__}() argument must be an instance of {expected} or a decorator of it, '
                f'{given} given'
            )
        super().__init__(message)
        self.decorator = decorator
        self.expected = expected
        self.given = given


def _name(t: object) -> str:
    return getattr(t, '__qualname__', None) or repr(t)


def _compatible(inner_t: object, outer_t: object) -> bool:
    if inner_t is None:
        return False
    if inner_t == outer_t:
        return True
    return isinstance(inner_t, type) and outer_t in inner_t.__mro__


def _owns(cls: type, name: Name, method: typing.Literal['__set__', '__delete__']) -> bool:
    """Returns True if `cls` defines `name` as a data descriptor that handles `method` for its instances."""
    for klass in cls.__mro__:
        if name in vars(klass):
            return hasattr(type(vars(klass)[name]), method)
    return False


def _accepts(cls: type[Decorator], component: object) -> bool:
    match cls.component_t:
        case None:
            return not isinstance(component, _primitive_ts)
        case component_t if isinstance(component, component_t):
            return True
        case component_t if isinstance(component, Decorator) and cls.deep:
            return isinstance(unwrap(component), component_t)
        case component_t if isinstance(component, Decorator):
            return _compatible(type(component).component_t, component_t)
        case _:
            return False


class Decorator[Component](abc.ABC):
    """Base for decorators that wrap a single component and forward everything they do not define to it.

    Class configuration:

        component_t: The type a wrapped component must be an instance of. Decorators of the same (or a more
            specific) component type are accepted too, so decorators stack. `None` accepts any non-primitive
            object. May be given as a class keyword, a class attribute, or a generic parameter.

        deep: When True, a wrapped decorator is accepted if the innermost component of its chain is an instance
            of `component_t`, regardless of the component types declared by the layers in between.
    """
    __slots__ = ('__decoratee',)

    component_t: typing.ClassVar[type | types.UnionType | None] = None
    deep: typing.ClassVar[bool] = False

    def __init_subclass__(cls, /, component_t: object = ..., deep: bool = ..., **kwargs) -> None:
        super().__init_subclass__(**kwargs)

        if component_t is ... and 'component_t' not in vars(cls):
            for base in types.get_original_bases(cls):
                match typing.get_origin(base), typing.get_args(base):
                    case [type() as origin, [arg]] if issubclass(origin, Decorator) and not isinstance(arg, typing.TypeVar):
                        component_t = arg
                        break

        if component_t is not ...:
            cls.component_t = component_t
        if deep is not ...:
            cls.deep = deep

    def __init__(self, component: Component, /) -> None:
        if type(self) is Decorator:
            raise TypeError(f"Can't instantiate abstract class {Decorator.__qualname__} directly, subclass it")
        if not _accepts(type(self), component):
            raise InvalidComponent(
                decorator=type(self),
                expected='object' if (component_t := type(self).component_t) is None else _name(component_t),
                given=type(component).__qualname__,
            )

        object.__setattr__(self, '_Decorator__decoratee', component)
        logger.debug('%s decorating %s.', type(self).__qualname__, type(component).__qualname__)

    @property
    def __wrapped__(self) -> Component:
        return self.__decoratee

    def __getattr__(self, name: Name) -> object:
        # Only reached when ordinary lookup on the decorator fails.
        if name == '_Decorator__decoratee':
            raise AttributeError(name)
        return getattr(self.__decoratee, name)

    def __setattr__(self, name: Name, value: object) -> None:
        if name == '_Decorator__decoratee':
            raise AttributeError(f'{type(self).__qualname__!r} object decoratee is read-only')
        if _owns(type(self), name, '__set__'):
            object.__setattr__(self, name, value)
        else:
            setattr(self.__decoratee, name, value)

    def __delattr__(self, name: Name) -> None:
        if name == '_Decorator__decoratee':
            raise AttributeError(f'{type(self).__qualname__!r} object decoratee is read-only')
        if _owns(type(self), name, '__delete__'):
            object.__delattr__(self, name)
        else:
            delattr(self.__decoratee, name)

    def __dir__(self) -> list[str]:
        return sorted({*super().__dir__(), *dir(self.__decoratee)})

    def __copy__(self) -> typing.Self:
        # Shares the wrapped component.
        return type(self)(self.__decoratee)

    def __deepcopy__(self, memo: dict[int, object]) -> typing.Self:
        return type(self)(copy.deepcopy(self.__decoratee, memo))

    def __repr__(self) -> str:
        try:
            decoratee = self.__decoratee
        except AttributeError:
            return object.__repr__(self)
        return f'{type(self).__qualname__}({decoratee!r})'


def unwrap(decorator: object, /) -> object:
    """Returns the innermost component of a chain of decorators, or `decorator` itself if it isn't one."""
    component = decorator
    while isinstance(component, Decorator):
        component = component.__wrapped__
    return component
