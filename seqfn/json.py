"""
seqfn.json - JSON serialization support for seqfn values.

This module provides a custom JSON encoder that can serialize the values
seqfn operations take and return: any Mapping (not only dict), sets, the
Representation enum and the Ok / Unsupported results of checked calls.

Usage:
    import json
    from seqfn.json import SeqJSONEncoder, dumps

    # Using the encoder class directly
    json.dumps(MappingProxyType({"a": 1}), cls=SeqJSONEncoder)

    # Using the convenience function
    dumps(checked(take)([1, 2, 3], 2))  # '{"ok": true, "value": [1, 2]}'
"""

import json
from collections.abc import Mapping
from enum import Enum
from typing import Any

from seqfn.types import Ok, Representation, Unsupported


class SeqJSONEncoder(json.JSONEncoder):
    """
    JSON encoder that handles seqfn values.

    Supported types:
    - Mapping -> object (keys converted to strings)
    - set, frozenset -> list (JSON has no set type)
    - Representation -> its string value (e.g., "ordered-list")
    - Ok -> {"ok": true, "value": ...}
    - Unsupported -> {"ok": false, "operation": ..., "representation": ...}

    Example:
        >>> from types import MappingProxyType
        >>> import json
        >>> json.dumps(MappingProxyType({"items": {1}}), cls=SeqJSONEncoder)
        '{"items": [1]}'
    """

    def default(self, o: Any) -> Any:
        """
        Convert seqfn values to JSON-serializable Python types.

        Args:
            o: The object to serialize.

        Returns:
            A JSON-serializable representation of the object.

        Raises:
            TypeError: If the object is not JSON serializable.
        """
        if isinstance(o, Mapping):
            return {self._convert_key(k): v for k, v in o.items()}

        if isinstance(o, (set, frozenset)):
            return list(o)

        if isinstance(o, Ok):
            return {"ok": True, "value": o.value}

        if isinstance(o, Unsupported):
            return {
                "ok": False,
                "operation": o.operation,
                "representation": o.representation.value,
            }

        if isinstance(o, Representation):
            return o.value

        # Fall back to default behavior (will raise TypeError)
        return super().default(o)

    def _convert_key(self, key: Any) -> str:
        """
        Convert a map key to a string suitable for JSON object keys.

        Args:
            key: The key to convert.

        Returns:
            A string representation of the key.
        """
        if isinstance(key, str):
            return key
        if isinstance(key, Enum):
            return str(key.value)
        # For other types, convert to string
        return str(key)


def dumps(obj: Any, **kwargs: Any) -> str:
    """Serialize obj to a JSON string using SeqJSONEncoder.

    Keyword arguments are passed through to json.dumps.
    """
    return json.dumps(obj, cls=SeqJSONEncoder, **kwargs)


def dump(obj: Any, fp: Any, **kwargs: Any) -> None:
    """Serialize obj as JSON to a file-like object using SeqJSONEncoder."""
    json.dump(obj, fp, cls=SeqJSONEncoder, **kwargs)


# Re-export loads and load from json module for convenience
# These don't need special handling since they produce Python types
loads = json.loads
load = json.load


__all__ = [
    "SeqJSONEncoder",
    "dumps",
    "dump",
    "loads",
    "load",
]
