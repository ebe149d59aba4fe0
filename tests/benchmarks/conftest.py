"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible payloads.  No random values.
Three tiers: 10-key flat, 100-key nested, 500-key deeply nested, plus a
multi-line text blob and a wide CSV.
"""

from __future__ import annotations

import json
from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "field_name") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def _make_nested_100() -> dict[str, Any]:
    """10 sections x 9 leaf keys + 10 section keys = 100 keys."""
    return {
        f"section_{i}": {f"field_name_{i}_{j}": f"value_{i}_{j}" for j in range(9)}
        for i in range(10)
    }


def _make_nested_500() -> dict[str, Any]:
    """5 sections x 5 groups x (8 leaves + 6-key detail object) + arrays = ~500 keys."""
    doc: dict[str, Any] = {}
    for i in range(5):
        mid: dict[str, Any] = {}
        for j in range(5):
            leaf: dict[str, Any] = {
                f"field_name_{i}_{j}_{k}": f"value_{i}_{j}_{k}" for k in range(8)
            }
            leaf[f"details_{i}_{j}"] = {f"detail_{k}": f"d_{i}_{j}_{k}" for k in range(6)}
            leaf["line_items"] = [{"unit_price": k, "item_sku": f"s_{k}"} for k in range(2)]
            mid[f"group_{j}"] = leaf
        doc[f"section_{i}"] = mid
    return doc


@pytest.fixture
def doc_10key() -> dict[str, Any]:
    return generate_flat_object(10)


@pytest.fixture
def doc_100key() -> dict[str, Any]:
    return _make_nested_100()


@pytest.fixture
def doc_500key() -> dict[str, Any]:
    return _make_nested_500()


@pytest.fixture
def json_500key_text() -> str:
    """The 500-key document serialized, as a json job would receive it."""
    return json.dumps(_make_nested_500())


@pytest.fixture
def text_blob() -> str:
    """~20k lines of snake_case identifiers."""
    return "\n".join(f"user_field_name_{i}" for i in range(20_000))


@pytest.fixture
def wide_csv() -> str:
    """A 200-column header over 1000 data rows."""
    header = ",".join(f"column_name_{i}" for i in range(200))
    rows = "\n".join(",".join(f"cell_{r}_{c}" for c in range(200)) for r in range(1000))
    return f"{header}\n{rows}"
