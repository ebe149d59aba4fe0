"""ConversionOptions and the enums that drive a conversion job.

ConversionOptions is a frozen (immutable) dataclass: one instance is built per
job and never mutated while the job runs.  ``from_dict`` / ``to_dict`` map it
to and from the camelCase wire form used by the request envelope.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from loguru import logger

__all__ = ["CaseStyle", "ConversionMode", "ConversionOptions", "InputType"]


class ConversionMode(StrEnum):
    """Source grammar of the text being converted.

    - SNAKE_TO_CAMEL: ``user_first_name`` -> ``userFirstName``
    - KEBAB_TO_CAMEL: ``user-first-name`` -> ``userFirstName``
    - TITLE_TO_CAMEL: ``User First Name`` -> ``userFirstName``
    - REVERSE:        ``userFirstName``   -> ``user_first_name``
    """

    SNAKE_TO_CAMEL = "snake-to-camel"
    KEBAB_TO_CAMEL = "kebab-to-camel"
    TITLE_TO_CAMEL = "title-to-camel"
    REVERSE = "reverse"


class CaseStyle(StrEnum):
    """Output style for forward conversions."""

    CAMEL = "camelCase"
    PASCAL = "PascalCase"


class InputType(StrEnum):
    """Payload kind carried by a job."""

    TEXT = "text"
    JSON = "json"
    CSV = "csv"


# Wire name -> dataclass field name
_WIRE_FIELDS: dict[str, str] = {
    "mode": "mode",
    "caseStyle": "case_style",
    "preserveAcronyms": "preserve_acronyms",
    "safeCharsOnly": "safe_chars_only",
    "trimWhitespace": "trim_whitespace",
    "excludePaths": "exclude_paths",
    "convertKeysOnly": "convert_keys_only",
    "prettyPrint": "pretty_print",
}


@dataclass(frozen=True, slots=True)
class ConversionOptions:
    """Immutable settings for one conversion job.

    Attributes:
        mode: Source grammar.  ``None`` disables the mode step entirely, so
            only whitespace trimming and safe-character filtering apply.
        case_style: camelCase lowers the first word; PascalCase capitalizes it.
        preserve_acronyms: Keep all-caps tokens (``XML``, ``ID``) upper-cased.
        safe_chars_only: Strip diacritics and any non-ASCII code point.
        trim_whitespace: Strip the ends and collapse internal whitespace runs.
        exclude_paths: Ordered JSON path patterns whose keys are not renamed.
            Exact (``$.a``), descendant (``$.a`` also covers ``$.a.b``) or
            glob (``$.*.secret``).  JSON input only.
        convert_keys_only: Only descend into container values.  JSON input only.
        pretty_print: Serialize JSON output with a 2-space indent instead of
            compact separators.  JSON input only.
    """

    mode: ConversionMode | None = ConversionMode.SNAKE_TO_CAMEL
    case_style: CaseStyle = CaseStyle.CAMEL
    preserve_acronyms: bool = True
    safe_chars_only: bool = False
    trim_whitespace: bool = True
    exclude_paths: tuple[str, ...] = ()
    convert_keys_only: bool = True
    pretty_print: bool = True

    def __post_init__(self) -> None:
        # Frozen: coerce through object.__setattr__
        if self.mode is not None and not isinstance(self.mode, ConversionMode):
            object.__setattr__(self, "mode", ConversionMode(self.mode))
        if not isinstance(self.case_style, CaseStyle):
            try:
                object.__setattr__(self, "case_style", CaseStyle(self.case_style))
            except ValueError:
                msg = (
                    f"case_style must be one of {[s.value for s in CaseStyle]}, "
                    f"got {self.case_style!r}"
                )
                raise ValueError(msg) from None
        if isinstance(self.exclude_paths, str):
            msg = "exclude_paths must be a sequence of patterns, not a single string"
            raise TypeError(msg)
        patterns = tuple(self.exclude_paths)
        for pattern in patterns:
            if not isinstance(pattern, str):
                msg = f"exclude_paths entries must be strings, got {pattern!r}"
                raise TypeError(msg)
        object.__setattr__(self, "exclude_paths", patterns)

    def with_mode(self, mode: ConversionMode | None) -> ConversionOptions:
        """Return a copy of these options with ``mode`` replaced."""
        return dataclasses.replace(self, mode=mode)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ConversionOptions:
        """Build options from the camelCase wire mapping.

        Missing fields take their defaults and unknown keys are ignored.  An
        unrecognized ``mode`` is not an error: it is logged and treated as
        ``None`` so the text passes through the mode step unchanged.  An
        unrecognized ``caseStyle`` is logged and treated as PascalCase.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            msg = f"options must be a mapping, got {type(data).__name__}"
            raise TypeError(msg)

        kwargs: dict[str, Any] = {}
        for wire_name, field_name in _WIRE_FIELDS.items():
            if wire_name in data and data[wire_name] is not None:
                kwargs[field_name] = data[wire_name]
            elif wire_name == "mode" and wire_name in data:
                kwargs["mode"] = None

        if "mode" in kwargs and kwargs["mode"] is not None:
            kwargs["mode"] = _lenient_mode(kwargs["mode"])
        if "case_style" in kwargs:
            kwargs["case_style"] = _lenient_case_style(kwargs["case_style"])
        if "exclude_paths" in kwargs:
            kwargs["exclude_paths"] = _as_patterns(kwargs["exclude_paths"])
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase wire mapping for these options."""
        out: dict[str, Any] = {}
        for wire_name, field_name in _WIRE_FIELDS.items():
            value = getattr(self, field_name)
            if isinstance(value, StrEnum):
                value = value.value
            elif isinstance(value, tuple):
                value = list(value)
            out[wire_name] = value
        return out


def _lenient_mode(value: Any) -> ConversionMode | None:
    try:
        return ConversionMode(value)
    except ValueError:
        logger.warning(f"unrecognized conversion mode {value!r}; leaving text unconverted")
        return None


def _lenient_case_style(value: Any) -> CaseStyle:
    # Anything but camelCase capitalizes the first word
    try:
        return CaseStyle(value)
    except ValueError:
        logger.warning(f"unrecognized case style {value!r}; using {CaseStyle.PASCAL.value}")
        return CaseStyle.PASCAL


def _as_patterns(value: Any) -> tuple[str, ...]:
    # Comma-separated form input, e.g. "$.a, $.b.*"
    if isinstance(value, str):
        return tuple(p.strip() for p in value.split(",") if p.strip())
    if isinstance(value, Iterable):
        return tuple(value)
    msg = f"excludePaths must be a list of strings, got {type(value).__name__}"
    raise TypeError(msg)
