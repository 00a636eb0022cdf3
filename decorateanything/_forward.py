"""Explicit forwarding to the component wrapped by a decorator.

These bypass whatever the decorator itself defines and go straight to the next layer, so an overriding method can
call through to the behavior it replaces:

    class Bold(decorateanything.Decorator[Text]):
        def draw(self) -> None:
            print('<b>', end='')
            decorateanything.invoke(self, 'draw')
            print('</b>', end='')

Errors raised by the wrapped component propagate unchanged.
"""
import typing

from . import _decorator


def get(decorator: _decorator.Decorator, name: _decorator.Name, /) -> object:
    assert isinstance(decorator, _decorator.Decorator), f'{decorator=} is not a decorator.'
    return getattr(decorator.__wrapped__, name)


def set(decorator: _decorator.Decorator, name: _decorator.Name, value: object, /) -> None:  # noqa
    assert isinstance(decorator, _decorator.Decorator), f'{decorator=} is not a decorator.'
    setattr(decorator.__wrapped__, name, value)


def has(decorator: _decorator.Decorator, name: _decorator.Name, /) -> bool:
    """Returns whether the wrapped component has `name`. An absent attribute is False, never an error."""
    assert isinstance(decorator, _decorator.Decorator), f'{decorator=} is not a decorator.'
    return hasattr(decorator.__wrapped__, name)


def unset(decorator: _decorator.Decorator, name: _decorator.Name, /) -> None:
    assert isinstance(decorator, _decorator.Decorator), f'{decorator=} is not a decorator.'
    delattr(decorator.__wrapped__, name)


def invoke[Return](
    decorator: _decorator.Decorator, name: _decorator.Name, /, *args: typing.Any, **kwargs: typing.Any
) -> Return:
    """Calls method `name` of the wrapped component with the given arguments and returns its result."""
    assert isinstance(decorator, _decorator.Decorator), f'{decorator=} is not a decorator.'
    return getattr(decorator.__wrapped__, name)(*args, **kwargs)
