"""
seqfn.combinators - Function combinators

Small higher-order helpers used to wire the catalogs and the sequence
operations together:

    from seqfn import compose, cond, partial, take, transformer, predicate

    shout = compose(transformer.trim, transformer.to_upper)
    shout("  hi ")                          # => "HI"

    first_two = partial(take, n=2)         # keyword arguments forward too
    halve_even = cond(predicate.is_even, lambda n: n // 2)
"""

from typing import Any, Callable


def apply(fn: Callable, *args: Any) -> Any:
    """Call fn with the rest of the arguments."""
    return fn(*args)


def partial(fn: Callable, *args: Any, **kwargs: Any) -> Callable:
    """Return fn with args prepended to the arguments of every later call."""

    def partially_applied(*rest, **more):
        return fn(*args, *rest, **{**kwargs, **more})

    return partially_applied


def compose(*fns: Callable) -> Callable:
    """
    Return a function that threads one value through fns, left to right.

    Example:
        >>> square = lambda x: x * x
        >>> compose(square, square)(2)
        16
    """

    def composed(value):
        for fn in fns:
            value = fn(value)
        return value

    return composed


def cond(pred: Callable, tr: Callable) -> Callable:
    """Return a function applying tr to its argument when pred holds on it.

    When pred is falsy the argument is returned unchanged.
    """

    def conditional(arg):
        return tr(arg) if pred(arg) else arg

    return conditional


__all__ = [
    "apply",
    "partial",
    "compose",
    "cond",
]
