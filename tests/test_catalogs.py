"""
Test suite for the predicate, transformer and reducer catalogs.
"""

import unittest

from seqfn import predicate, reducer, transformer


class TestPredicates(unittest.TestCase):
    """Test the predicate catalog."""

    def test_not_negates(self):
        is_not_even = predicate.not_(predicate.is_even)
        self.assertTrue(is_not_even(3))
        self.assertFalse(is_not_even(4))

    def test_not_forwards_all_arguments(self):
        both = predicate.not_(lambda k, v: k == v)
        self.assertTrue(both("a", "b"))
        self.assertFalse(both("a", "a"))

    def test_even_odd(self):
        self.assertTrue(predicate.is_even(0))
        self.assertTrue(predicate.is_even(-4))
        self.assertFalse(predicate.is_even(7))
        self.assertTrue(predicate.is_odd(7))
        self.assertTrue(predicate.is_odd(-3))
        self.assertFalse(predicate.is_odd(2))

    def test_is_digit(self):
        for char in "0123456789":
            self.assertTrue(predicate.is_digit(char), char)
        for char in ("a", " ", "", "-", "1.5", "٣"):
            self.assertFalse(predicate.is_digit(char), char)

    def test_is_digit_uses_string_form(self):
        self.assertTrue(predicate.is_digit(7))
        self.assertFalse(predicate.is_digit(None))

    def test_is_alphabetic(self):
        self.assertTrue(predicate.is_alphabetic("a"))
        self.assertTrue(predicate.is_alphabetic("Z"))
        self.assertTrue(predicate.is_alphabetic("abc"))
        for char in ("1", "_", "[", "`", "", " ", "é"):
            self.assertFalse(predicate.is_alphabetic(char), char)


class TestTransformers(unittest.TestCase):
    """Test the transformer catalog."""

    def test_identity(self):
        value = [1, 2]
        self.assertIs(transformer.identity(value), value)

    def test_case(self):
        self.assertEqual(transformer.to_upper("aBc"), "ABC")
        self.assertEqual(transformer.to_lower("aBc"), "abc")

    def test_trim(self):
        self.assertEqual(transformer.trim("  hi \n\t"), "hi")
        self.assertEqual(transformer.trim("a b"), "a b")

    def test_stringify_is_compact(self):
        self.assertEqual(transformer.stringify({"a": [1, 2]}), '{"a":[1,2]}')
        self.assertEqual(transformer.stringify("x"), '"x"')
        self.assertEqual(transformer.stringify(None), "null")

    def test_stringify_indent(self):
        self.assertEqual(transformer.stringify([1], indent=2), "[\n  1\n]")


class TestReducers(unittest.TestCase):
    """Test the reducer catalog."""

    def test_arithmetic(self):
        self.assertEqual(reducer.add(2, 3), 5)
        self.assertEqual(reducer.sub(2, 3), -1)
        self.assertEqual(reducer.mul(2, 3), 6)
        self.assertEqual(reducer.div(3, 2), 1.5)
        self.assertEqual(reducer.mod(7, 3), 1)

    def test_add_concatenates_strings(self):
        self.assertEqual(reducer.add("a", "b"), "ab")

    def test_division_by_zero_propagates(self):
        with self.assertRaises(ZeroDivisionError):
            reducer.div(1, 0)
        with self.assertRaises(ZeroDivisionError):
            reducer.mod(1, 0)

    def test_with_functools_reduce(self):
        from functools import reduce

        self.assertEqual(reduce(reducer.add, [1, 2, 3, 4]), 10)
        self.assertEqual(reduce(reducer.mul, [1, 2, 3, 4]), 24)


if __name__ == "__main__":
    unittest.main()
