"""JsonKeyTransformer: renames object keys throughout a decoded JSON value.

The walk is recursive and shape-preserving: arrays stay arrays of the same
length, objects keep their key insertion order, and scalar values are returned
untouched.  Only object keys are rewritten.

Canonical paths are built during traversal so exclusion patterns can address
any key:
- Root is "$"
- Object members append ".{key}" ("$.user.name")
- Array elements append "[{index}]" ("$.items[0].sku")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from keycase.options import ConversionMode, ConversionOptions
from keycase.paths import ROOT, ExclusionMatcher, child_path, element_path
from keycase.text.pipeline import convert_text
from keycase.tree.nodes import JsonValue, ValueKind, classify

__all__ = ["JsonKeyTransformer", "convert_json_keys"]


@dataclass
class JsonKeyTransformer:
    """Converts the keys of a decoded JSON value according to ``options``.

    Keys are converted with the text pipeline in snake-to-camel mode unless
    the options ask for REVERSE, in which case keys are rewritten to
    snake_case.  Any other mode setting is ignored for keys.

    Exclusion applies to a single key only: an excluded key keeps its original
    name but its descendants are still visited and converted unless a pattern
    covers them too (``$.a`` also covers ``$.a.b`` through the descendant
    rule, but not ``$.a[0].b``).

    Example::

        transformer = JsonKeyTransformer(ConversionOptions(exclude_paths=("$.a_b",)))
        transformer.transform({"a_b": {"c_d": 1}, "items": [{"a_b": 2}]})
        # {"a_b": {"c_d": 1}, "items": [{"aB": 2}]}
    """

    options: ConversionOptions
    _key_options: ConversionOptions = field(init=False, repr=False)
    _matcher: ExclusionMatcher = field(init=False, repr=False)

    def __post_init__(self) -> None:
        key_mode = (
            ConversionMode.REVERSE
            if self.options.mode == ConversionMode.REVERSE
            else ConversionMode.SNAKE_TO_CAMEL
        )
        self._key_options = self.options.with_mode(key_mode)
        self._matcher = ExclusionMatcher(self.options.exclude_paths)

    def transform(self, value: JsonValue, path: str = ROOT) -> JsonValue:
        """Return a copy of ``value`` with its object keys converted.

        Args:
            value: Any decoded JSON value (dict, list, str, int, float, bool, None).
            path:  Canonical path of ``value``.  Defaults to "$" (root).

        Returns:
            A new value of the same shape; scalars are returned as-is.

        Raises:
            TypeError: If ``value`` contains a non-JSON Python object.
        """
        kind = classify(value)
        if kind == ValueKind.OBJECT:
            return self._transform_object(value, path)  # type: ignore[arg-type]
        if kind == ValueKind.ARRAY:
            return [
                self.transform(item, element_path(path, idx))
                for idx, item in enumerate(value)  # type: ignore[arg-type]
            ]
        return value

    def convert_key(self, key: str, path: str) -> str:
        """Return the new name for ``key`` located at ``path``."""
        if self._matcher and self._matcher.excludes(path):
            return key
        return convert_text(key, self._key_options)

    def _transform_object(self, obj: dict[str, Any], path: str) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, val in obj.items():
            key_path = child_path(path, key)
            new_key = self.convert_key(key, key_path)
            if self.options.convert_keys_only and not classify(val).is_container:
                result[new_key] = val
            else:
                result[new_key] = self.transform(val, key_path)
        return result


def convert_json_keys(value: JsonValue, options: ConversionOptions, path: str = ROOT) -> JsonValue:
    """Convert the object keys of ``value``; see ``JsonKeyTransformer``."""
    return JsonKeyTransformer(options).transform(value, path)
