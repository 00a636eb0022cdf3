#!/usr/bin/env python3
"""Decorates a `Text` with bold and italic markup.

Run with any of the following:
- python3 -m demo
- python3 -m demo.text
"""
import pprint

import decorateanything


class Text:

    def __init__(self, text: str) -> None:
        self.text = text

    def draw(self) -> None:
        print(self.text, end='')

    def clear(self) -> None:
        self.text = ''

    def dump(self) -> None:
        pprint.pprint(vars(self))

    def __repr__(self) -> str:
        return f'{type(self).__qualname__}({self.text!r})'


class Bold(decorateanything.Decorator[Text]):

    def draw(self) -> None:
        print('<b>', end='')
        decorateanything.invoke(self, 'draw')
        print('</b>', end='')


class Italic(decorateanything.Decorator, component_t=Text):

    def draw(self) -> None:
        print('<i>', end='')
        self.__wrapped__.draw()
        print('</i>', end='')


def main() -> None:
    text = Italic(Bold(Text('Hello World')))

    # Decorated method.
    text.draw()
    print()

    # Forwarded methods.
    text.dump()
    text.clear()
    text.dump()

    print(f'Decorated object: {text!r}')


if __name__ == '__main__':
    main()
