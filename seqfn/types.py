"""
seqfn.types - Core type definitions for seqfn

This module contains the types shared by every operation:
- Representation: The closed set of sequence families an operation can see
- classify: Maps a runtime value to its Representation
- Ok / Unsupported: Explicit outcome of a checked operation call
- UnsupportedRepresentation: Raised when an Unsupported outcome is unwrapped

These types are used by the dispatch layer in seqfn.core to pick a
representation-specific implementation, and by callers that prefer a
checked result over the None sentinel.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

# Sentinel for missing values
_MISSING = object()


class Representation(Enum):
    """The sequence families recognized by the core operations."""

    ORDERED_LIST = "ordered-list"
    CHARACTER_SEQUENCE = "character-sequence"
    KEY_VALUE_MAPPING = "key-value-mapping"
    UNSUPPORTED = "unsupported"

    def __repr__(self):
        return f"Representation.{self.name}"


def classify(value: Any) -> Representation:
    """
    Return the Representation of a runtime value.

    Strings are checked first so that a str is never treated as an ordered
    list. Lists and tuples are ordered lists, any Mapping is a key-value
    mapping, everything else (numbers, None, bytes, sets, iterators) is
    unsupported.
    """
    if isinstance(value, str):
        return Representation.CHARACTER_SEQUENCE
    if isinstance(value, (list, tuple)):
        return Representation.ORDERED_LIST
    if isinstance(value, Mapping):
        return Representation.KEY_VALUE_MAPPING
    return Representation.UNSUPPORTED


class UnsupportedRepresentation(TypeError):
    """Raised when an operation's result is requested for an unsupported input."""

    def __init__(self, operation: str, representation: Representation, value: Any):
        self.operation = operation
        self.representation = representation
        self.value = value
        super().__init__(
            f"{operation} does not support {type(value).__name__} "
            f"({representation.value})"
        )


@dataclass(frozen=True)
class Ok:
    """
    Successful outcome of a checked operation.

    Attributes:
        value: The result, in the same representation as the input
    """

    value: Any

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Return the wrapped value."""
        return self.value

    def __repr__(self):
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Unsupported:
    """
    Outcome of a checked operation whose input had no implementation.

    Attributes:
        operation: Name of the operation that was called (e.g., "take")
        representation: The Representation the input was classified as
        value: The offending input
    """

    operation: str
    representation: Representation
    value: Any

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Raise UnsupportedRepresentation; there is no value to return."""
        raise UnsupportedRepresentation(self.operation, self.representation, self.value)

    def __repr__(self):
        return f"Unsupported({self.operation}, {type(self.value).__name__})"


# Type exports
__all__ = [
    "Representation",
    "classify",
    "Ok",
    "Unsupported",
    "UnsupportedRepresentation",
    "_MISSING",
]
