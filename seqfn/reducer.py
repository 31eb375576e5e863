"""
seqfn.reducer - Reducer catalog

Binary arithmetic functions (a, b) -> number, usable with functools.reduce
and partial. Host semantics apply: div and mod raise ZeroDivisionError on
a zero divisor.
"""


def add(a, b):
    """Return the sum of a and b."""
    return a + b


def sub(a, b):
    """Subtract b from a."""
    return a - b


def mul(a, b):
    """Multiply a by b."""
    return a * b


def div(a, b):
    """Divide a by b (true division)."""
    return a / b


def mod(a, b):
    """Modulo operation."""
    return a % b


__all__ = [
    "add",
    "sub",
    "mul",
    "div",
    "mod",
]
