"""Tests for JSON pre-flight validation and offset -> line/column mapping."""

from __future__ import annotations

import pytest

from keycase.validation import line_column_at, load_json, validate_json


class TestLineColumnAt:
    @pytest.mark.parametrize(
        ("text", "position", "expected"),
        [
            ("abc", 0, (1, 1)),
            ("abc", 2, (1, 3)),
            ("ab\ncd", 3, (2, 1)),
            ("ab\ncd\nef", 7, (3, 2)),
        ],
    )
    def test_positions(self, text: str, position: int, expected: tuple[int, int]) -> None:
        assert line_column_at(text, position) == expected


class TestValidateJson:
    def test_valid(self) -> None:
        result = validate_json('{"a": [1, 2]}')
        assert result.success
        assert result.data == {"a": [1, 2]}
        assert result.error is None

    def test_invalid_reports_position(self) -> None:
        result = validate_json('{\n  "a":\n}')
        assert not result.success
        assert result.data is None
        assert result.error is not None
        assert result.error.message
        assert (result.error.line, result.error.column) == (3, 1)

    def test_matches_decoder_position(self) -> None:
        import json

        text = '[1,\n 2,,]'
        with pytest.raises(json.JSONDecodeError) as info:
            json.loads(text)
        result = validate_json(text)
        assert result.error is not None
        assert (result.error.line, result.error.column) == (info.value.lineno, info.value.colno)

    def test_empty_input(self) -> None:
        result = validate_json("")
        assert not result.success
        assert result.error is not None
        assert (result.error.line, result.error.column) == (1, 1)

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_non_json_constants_rejected(self, literal: str) -> None:
        result = validate_json(f"[1, {literal}]")
        assert not result.success
        assert result.error is not None
        assert result.error.message == f"Unexpected token {literal}"
        assert (result.error.line, result.error.column) == (None, None)

    def test_float_overflow_decodes_as_none(self) -> None:
        result = validate_json('{"a": 1e400, "b": 1.5}')
        assert result.success
        assert result.data == {"a": None, "b": 1.5}


class TestLoadJson:
    def test_plain_document(self) -> None:
        assert load_json('{"a": [1, 2.5, "x", null]}') == {"a": [1, 2.5, "x", None]}

    def test_rejects_nan(self) -> None:
        with pytest.raises(ValueError, match="Unexpected token NaN"):
            load_json('{"a": NaN}')

    def test_malformed_still_decode_error(self) -> None:
        import json

        with pytest.raises(json.JSONDecodeError):
            load_json('{"a":}')
