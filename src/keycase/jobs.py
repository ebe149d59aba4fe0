"""Job request and response envelopes.

A ``Job`` is one request: a payload, its input type and the options to apply.
It yields exactly one result, ``JobSuccess`` or ``JobFailure``.  Both sides
map to the plain-dict wire form::

    {"text": "...", "inputType": "json", "options": {...}}
    {"type": "success", "result": "..."}
    {"type": "error", "error": "..."}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from keycase.options import ConversionOptions, InputType

__all__ = ["Job", "JobFailure", "JobResult", "JobSuccess", "result_from_dict"]

_INPUT_TYPES: dict[str, InputType] = {t.value: t for t in InputType}


@dataclass(frozen=True, slots=True)
class Job:
    """One conversion request.

    Attributes:
        text:       The whole payload.
        input_type: How to interpret ``text``.  Unknown values coming off the
                    wire are kept as raw strings and processed as plain text.
        options:    Settings for this job only.
    """

    text: str
    input_type: InputType | str = InputType.TEXT
    options: ConversionOptions = field(default_factory=ConversionOptions)

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            msg = f"text must be a string, got {type(self.text).__name__}"
            raise TypeError(msg)
        if not isinstance(self.input_type, InputType):
            # Unknown types stay raw strings and are routed as plain text
            object.__setattr__(
                self, "input_type", _INPUT_TYPES.get(self.input_type, self.input_type)
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Job:
        """Decode a request envelope.

        Raises:
            TypeError: If ``data`` is not a mapping or ``text`` is not a string.
            KeyError: If ``text`` is missing.
        """
        if not isinstance(data, Mapping):
            msg = f"request must be a mapping, got {type(data).__name__}"
            raise TypeError(msg)
        return cls(
            text=data["text"],
            input_type=data.get("inputType") or InputType.TEXT,
            options=ConversionOptions.from_dict(data.get("options")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "inputType": str(self.input_type),
            "options": self.options.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class JobSuccess:
    """A completed job's output text."""

    result: str
    type: Literal["success"] = "success"

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "result": self.result}


@dataclass(frozen=True, slots=True)
class JobFailure:
    """A failed job.

    ``error`` is free text meant for display; no structured error code is
    part of the contract.
    """

    error: str
    type: Literal["error"] = "error"

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "error": self.error}


JobResult = JobSuccess | JobFailure


def result_from_dict(data: Mapping[str, Any]) -> JobResult:
    """Decode a response envelope.

    Raises:
        ValueError: If ``type`` is neither "success" nor "error".
    """
    kind = data.get("type")
    if kind == "success":
        return JobSuccess(result=data["result"])
    if kind == "error":
        return JobFailure(error=data["error"])
    msg = f"unknown response type {kind!r}"
    raise ValueError(msg)
