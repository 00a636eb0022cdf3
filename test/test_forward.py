import unittest

import decorateanything


class Counter:

    def __init__(self) -> None:
        self.count = 0

    def add(self, n: int = 1, *, times: int = 1) -> int:
        self.count += n * times
        return self.count


class Doubling(decorateanything.Decorator[Counter]):

    def add(self, n: int = 1, *, times: int = 1) -> int:
        return decorateanything.invoke(self, 'add', 2 * n, times=times)


class TestForward(unittest.TestCase):

    def setUp(self) -> None:
        self.counter = Counter()
        self.doubling = Doubling(self.counter)

    def test_get(self) -> None:
        self.counter.count = 3
        self.assertEqual(decorateanything.get(self.doubling, 'count'), 3)

    def test_get_bypasses_decorator(self) -> None:
        self.assertEqual(decorateanything.get(self.doubling, 'add').__self__, self.counter)

    def test_get_missing(self) -> None:
        with self.assertRaises(AttributeError):
            decorateanything.get(self.doubling, 'missing')

    def test_set(self) -> None:
        decorateanything.set(self.doubling, 'count', 5)
        self.assertEqual(self.counter.count, 5)
        self.assertEqual(self.doubling.count, 5)

    def test_has(self) -> None:
        self.assertTrue(decorateanything.has(self.doubling, 'count'))
        self.assertTrue(decorateanything.has(self.doubling, 'add'))
        self.assertFalse(decorateanything.has(self.doubling, 'missing'))

    def test_has_ignores_decorator_members(self) -> None:
        self.assertTrue(hasattr(self.doubling, 'component_t'))
        self.assertFalse(decorateanything.has(self.doubling, 'component_t'))

    def test_unset(self) -> None:
        decorateanything.unset(self.doubling, 'count')
        self.assertFalse(hasattr(self.counter, 'count'))

    def test_unset_missing(self) -> None:
        with self.assertRaises(AttributeError):
            decorateanything.unset(self.doubling, 'missing')

    def test_invoke(self) -> None:
        self.assertEqual(decorateanything.invoke(self.doubling, 'add', 3), 3)
        self.assertEqual(decorateanything.invoke(self.doubling, 'add', 1, times=2), 5)

    def test_invoke_call_through(self) -> None:
        self.assertEqual(self.doubling.add(3), 6)
        self.assertEqual(Doubling(self.doubling).add(1, times=2), 14)

    def test_invoke_missing(self) -> None:
        with self.assertRaises(AttributeError):
            decorateanything.invoke(self.doubling, 'missing')

    def test_invoke_error(self) -> None:
        with self.assertRaises(TypeError):
            decorateanything.invoke(self.doubling, 'add', 'a', 'b')

    def test_not_a_decorator(self) -> None:
        for f, args in (
            (decorateanything.get, ('count',)),
            (decorateanything.set, ('count', 1)),
            (decorateanything.has, ('count',)),
            (decorateanything.unset, ('count',)),
            (decorateanything.invoke, ('add',)),
        ):
            with self.assertRaises(AssertionError):
                f(self.counter, *args)


if __name__ == '__main__':
    unittest.main(verbosity=2)
