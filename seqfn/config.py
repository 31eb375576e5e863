"""
seqfn.config - Options for the sequence operations

This module holds the small amount of configuration the operations accept.
It provides the SeqOptions class and a module-level DEFAULT_OPTIONS that
operations fall back to when no explicit setting is passed.

Options can be built from a plain mapping, for example one read from a
project's own settings file:
    {"merge-policy": "first-wins"}
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ConfigError(ValueError):
    """Raised when options cannot be built from the given values."""

    pass


class MergePolicy(Enum):
    """Which value survives when concat merges mappings that share a key."""

    LAST_WINS = "last-wins"
    FIRST_WINS = "first-wins"


def _normalize_key(key: str) -> str:
    return key.replace("-", "_")


def _parse_policy(value: Any) -> MergePolicy:
    if isinstance(value, MergePolicy):
        return value
    try:
        return MergePolicy(value)
    except ValueError:
        choices = ", ".join(p.value for p in MergePolicy)
        raise ConfigError(
            f"Unknown merge policy {value!r} (expected one of: {choices})"
        ) from None


@dataclass(frozen=True)
class SeqOptions:
    """
    Options for the sequence operations.

    Optional fields:
        merge_policy: Key collision rule used by concat on mappings
                      (default: MergePolicy.LAST_WINS)
    """

    merge_policy: MergePolicy = MergePolicy.LAST_WINS

    @classmethod
    def from_dict(cls, raw: Optional[dict[str, Any]] = None) -> "SeqOptions":
        """
        Build options from a mapping.

        Keys may use hyphens or underscores ("merge-policy" or
        "merge_policy"). Values may be enum members or their string values.

        Raises:
            ConfigError: If a key is unknown or a value is invalid
        """
        raw = dict(raw or {})
        kwargs: dict[str, Any] = {}
        for key, value in raw.items():
            name = _normalize_key(str(key))
            if name == "merge_policy":
                kwargs["merge_policy"] = _parse_policy(value)
            else:
                raise ConfigError(f"Unknown option: {key!r}")
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return the options as a plain mapping of string values."""
        return {"merge-policy": self.merge_policy.value}


DEFAULT_OPTIONS = SeqOptions()


__all__ = [
    "ConfigError",
    "MergePolicy",
    "SeqOptions",
    "DEFAULT_OPTIONS",
]
