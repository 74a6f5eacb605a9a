from functools import cmp_to_key
from unittest import TestCase

from ..boundaries import NotComparable
from ..ordering import byKey, naturalOrder, reverseOrder


class NaturalOrderTests(TestCase):
    def test_signs(self) -> None:
        self.assertEqual(naturalOrder(1, 2), -1)
        self.assertEqual(naturalOrder(2, 2), 0)
        self.assertEqual(naturalOrder(3, 2), 1)
        self.assertEqual(naturalOrder("b", "a"), 1)

    def test_mixedNumbers(self) -> None:
        self.assertEqual(naturalOrder(1, 1.5), -1)

    def test_unordered(self) -> None:
        with self.assertRaises(NotComparable) as raised:
            naturalOrder(1, "one")
        self.assertIn("'int' and 'str'", str(raised.exception))
        self.assertIsInstance(raised.exception.__cause__, TypeError)


class ReverseOrderTests(TestCase):
    def test_reversed(self) -> None:
        order = reverseOrder()
        self.assertEqual(order(1, 2), 1)
        self.assertEqual(order(2, 2), 0)
        self.assertEqual(order(3, 2), -1)

    def test_doubleReverse(self) -> None:
        order = reverseOrder(reverseOrder())
        self.assertEqual(
            sorted([3, 1, 2], key=cmp_to_key(order)), [1, 2, 3]
        )


class ByKeyTests(TestCase):
    def test_key(self) -> None:
        order = byKey(len)
        self.assertEqual(order("aaa", "b"), 1)
        self.assertEqual(order("aa", "bb"), 0)

    def test_keyWithOrder(self) -> None:
        order = byKey(abs, reverseOrder())
        self.assertEqual(
            sorted([-3, 1, 2], key=cmp_to_key(order)), [-3, 2, 1]
        )
