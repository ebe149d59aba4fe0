"""Tests for the Job request envelope and the JobSuccess / JobFailure results."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from keycase.jobs import Job, JobFailure, JobSuccess, result_from_dict
from keycase.options import ConversionMode, ConversionOptions, InputType


class TestJob:
    def test_defaults(self) -> None:
        job = Job(text="a_b")
        assert job.input_type is InputType.TEXT
        assert job.options == ConversionOptions()

    def test_string_input_type_coerced(self) -> None:
        assert Job(text="{}", input_type="json").input_type is InputType.JSON

    def test_unknown_input_type_kept_raw(self) -> None:
        assert Job(text="x", input_type="yaml").input_type == "yaml"

    def test_text_must_be_string(self) -> None:
        with pytest.raises(TypeError, match="text must be a string"):
            Job(text=42)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        job = Job(text="x")
        with pytest.raises(FrozenInstanceError):
            job.text = "y"  # type: ignore[misc]

    def test_from_dict(self) -> None:
        job = Job.from_dict(
            {"text": "userName", "inputType": "csv", "options": {"mode": "reverse"}}
        )
        assert job.text == "userName"
        assert job.input_type is InputType.CSV
        assert job.options.mode is ConversionMode.REVERSE

    def test_from_dict_defaults(self) -> None:
        job = Job.from_dict({"text": "x"})
        assert job.input_type is InputType.TEXT
        assert job.options == ConversionOptions()

    def test_from_dict_missing_text(self) -> None:
        with pytest.raises(KeyError):
            Job.from_dict({"inputType": "text"})

    def test_from_dict_rejects_non_mapping(self) -> None:
        with pytest.raises(TypeError, match="request must be a mapping"):
            Job.from_dict("a_b")  # type: ignore[arg-type]

    def test_to_dict_round_trip(self) -> None:
        job = Job(text="a", input_type=InputType.JSON, options=ConversionOptions(pretty_print=False))
        assert Job.from_dict(job.to_dict()) == job
        assert job.to_dict()["inputType"] == "json"


class TestResults:
    def test_success_envelope(self) -> None:
        result = JobSuccess(result="userName")
        assert result.ok
        assert result.to_dict() == {"type": "success", "result": "userName"}

    def test_failure_envelope(self) -> None:
        result = JobFailure(error="boom")
        assert not result.ok
        assert result.to_dict() == {"type": "error", "error": "boom"}

    def test_result_from_dict(self) -> None:
        assert result_from_dict({"type": "success", "result": "x"}) == JobSuccess(result="x")
        assert result_from_dict({"type": "error", "error": "e"}) == JobFailure(error="e")

    def test_result_from_dict_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="unknown response type"):
            result_from_dict({"type": "progress"})
