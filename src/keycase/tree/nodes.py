"""ValueKind StrEnum and the classifier used to dispatch JSON traversal.

``json.loads`` produces six Python shapes.  ``classify`` maps each to a
ValueKind so the transformer can branch on an explicit tag rather than ad-hoc
isinstance chains scattered through the recursion.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any

__all__ = ["JsonValue", "ValueKind", "classify"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class ValueKind(StrEnum):
    """The six JSON value kinds.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"
    - STRING  -> "string"
    - ARRAY   -> "array"
    - OBJECT  -> "object"
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()

    @property
    def is_container(self) -> bool:
        return self in (ValueKind.ARRAY, ValueKind.OBJECT)


def classify(value: JsonValue) -> ValueKind:
    """Return the ValueKind of a decoded JSON value.

    bool MUST be checked before int: bool subclasses int in Python.

    Raises:
        TypeError: If ``value`` is not a JSON-compatible Python value.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")
