"""
seqfn.predicate - Predicate catalog

One-argument tests meant to be passed to drop_while, take_while, filter
and cond. Character classes cover ASCII only.
"""

import re
from typing import Any, Callable

_DIGITS = re.compile(r"[0-9]+")
_LETTERS = re.compile(r"[A-Za-z]+")


def not_(pred: Callable[..., Any]) -> Callable[..., bool]:
    """Return a predicate that negates pred."""

    def negated(*args, **kwargs):
        return not pred(*args, **kwargs)

    return negated


def is_even(n) -> bool:
    """Return True if n is even."""
    return n % 2 == 0


def is_odd(n) -> bool:
    """Return True if n is odd."""
    return n % 2 != 0


def is_digit(char) -> bool:
    """Return True if char is made of the digits 0-9 only.

    Non-string arguments are tested on their str() form, so is_digit(7) is
    True. The empty string is not a digit.
    """
    return _DIGITS.fullmatch(str(char)) is not None


def is_alphabetic(char) -> bool:
    """Return True if char is made of the ASCII letters A-Z and a-z only."""
    return _LETTERS.fullmatch(str(char)) is not None


__all__ = [
    "not_",
    "is_even",
    "is_odd",
    "is_digit",
    "is_alphabetic",
]
