"""JSON pre-flight validation with line/column error reporting.

``load_json`` is the strict decoder shared with the dispatcher: the
``NaN`` / ``Infinity`` / ``-Infinity`` literals that ``json.loads`` accepts by
default are rejected, and a number too large for a float decodes as ``None``
(serialized back as ``null``).

``validate_json`` never raises: callers that want to show a parse error next to
the offending input (before submitting a job) get a ``JsonValidation`` result
with 1-based line and column numbers.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any

__all__ = ["JsonValidation", "ValidationError", "line_column_at", "load_json", "validate_json"]


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A JSON parse failure.

    Attributes:
        message: The parser's message, without the position suffix.
        line:    1-based line of the failure, when known.
        column:  1-based column of the failure, when known.
    """

    message: str
    line: int | None = None
    column: int | None = None


@dataclass(frozen=True, slots=True)
class JsonValidation:
    """Outcome of ``validate_json``: either ``data`` or ``error`` is set."""

    success: bool
    data: Any = None
    error: ValidationError | None = None


def line_column_at(text: str, position: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of character offset ``position``."""
    head = text[:position]
    line = head.count("\n") + 1
    column = position - (head.rfind("\n") + 1) + 1
    return line, column


def _reject_constant(name: str) -> Any:
    msg = f"Unexpected token {name}"
    raise ValueError(msg)


def _parse_float(literal: str) -> float | None:
    value = float(literal)
    return value if math.isfinite(value) else None


def load_json(text: str) -> Any:
    """Decode ``text`` as strict JSON.

    Raises:
        json.JSONDecodeError: If ``text`` is not well-formed JSON.
        ValueError: If ``text`` uses a ``NaN`` or ``Infinity`` literal.
    """
    return json.loads(text, parse_constant=_reject_constant, parse_float=_parse_float)


def validate_json(text: str) -> JsonValidation:
    """Parse ``text`` as JSON without raising.

    Args:
        text: The candidate JSON document.

    Returns:
        ``JsonValidation(success=True, data=...)`` on success, otherwise
        ``JsonValidation(success=False, error=ValidationError(...))``.
    """
    try:
        data = load_json(text)
    except json.JSONDecodeError as exc:
        line, column = line_column_at(text, exc.pos)
        return JsonValidation(
            success=False, error=ValidationError(message=exc.msg, line=line, column=column)
        )
    except ValueError as exc:
        # Rejected constant: the decoder reports no offset
        return JsonValidation(success=False, error=ValidationError(message=str(exc)))
    return JsonValidation(success=True, data=data)
