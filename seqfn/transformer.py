"""
seqfn.transformer - Transformer catalog

One-argument value transforms, mostly over strings. stringify produces the
compact JSON text a browser serializer would.
"""

from typing import Any

from seqfn.json import dumps


def identity(x):
    """The identity function. Returns the argument as is."""
    return x


def to_upper(s: str) -> str:
    """Return an all uppercase version of s."""
    return s.upper()


def to_lower(s: str) -> str:
    """Return an all lowercase version of s."""
    return s.lower()


def trim(s: str) -> str:
    """Return s without leading or trailing whitespace."""
    return s.strip()


def stringify(value: Any, indent: int | str | None = None) -> str:
    """
    Serialize a value to JSON text.

    Without indent the output is compact ("," and ":" separators, no
    spaces). With indent it is pretty printed.

    Example:
        >>> stringify({"a": [1, 2]})
        '{"a":[1,2]}'
    """
    if indent is None:
        return dumps(value, separators=(",", ":"))
    return dumps(value, indent=indent)


__all__ = [
    "identity",
    "to_upper",
    "to_lower",
    "trim",
    "stringify",
]
