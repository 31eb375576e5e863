"""
Test suite for the function combinators.

This module also checks that the combinators wire the catalogs and the
sequence operations together.
"""

import unittest

from seqfn import (
    apply,
    compose,
    cond,
    filter,
    partial,
    predicate,
    reducer,
    take,
    transformer,
)


class TestApply(unittest.TestCase):
    def test_apply(self):
        self.assertEqual(apply(reducer.add, 1, 2), 3)
        self.assertEqual(apply(lambda: "none"), "none")


class TestPartial(unittest.TestCase):
    def test_prepends_arguments(self):
        minus = partial(reducer.sub, 10)
        self.assertEqual(minus(3), 7)

    def test_no_arguments(self):
        self.assertEqual(partial(reducer.add)(1, 2), 3)

    def test_keyword_arguments(self):
        first_two = partial(take, n=2)
        self.assertEqual(first_two([1, 2, 3]), [1, 2])
        self.assertEqual(first_two("abc", n=1), "a")

    def test_predicate_for_filter(self):
        drop_evens = partial(filter, predicate.is_even)
        self.assertEqual(drop_evens([1, 2, 3, 4]), [1, 3])


class TestCompose(unittest.TestCase):
    def test_left_to_right(self):
        square = lambda x: x * x  # noqa: E731
        self.assertEqual(compose(square, square)(2), 16)
        inc = partial(reducer.add, 1)
        double = partial(reducer.mul, 2)
        self.assertEqual(compose(inc, double)(3), 8)
        self.assertEqual(compose(double, inc)(3), 7)

    def test_empty_is_identity(self):
        self.assertEqual(compose()(5), 5)

    def test_string_pipeline(self):
        shout = compose(transformer.trim, transformer.to_upper)
        self.assertEqual(shout("  hi "), "HI")

    def test_sequence_pipeline(self):
        pipeline = compose(
            partial(filter, predicate.is_digit),
            transformer.to_lower,
            partial(take, n=3),
        )
        self.assertEqual(pipeline("A1B2C3D"), "abc")


class TestCond(unittest.TestCase):
    def test_applies_when_pred_holds(self):
        halve_even = cond(predicate.is_even, lambda n: n // 2)
        self.assertEqual(halve_even(8), 4)
        self.assertEqual(halve_even(7), 7)

    def test_transformer_not_called_otherwise(self):
        calls = []

        def tr(x):
            calls.append(x)
            return x

        cond(lambda _: False, tr)(1)
        self.assertEqual(calls, [])


if __name__ == "__main__":
    unittest.main()
