"""keycase - structural case conversion for text, JSON keys and CSV headers."""

from __future__ import annotations

from keycase.api import (
    convert,
    convert_async,
    convert_csv,
    convert_json,
    convert_text,
)
from keycase.dispatcher import DispatcherState, JobDispatcher, handle_job
from keycase.jobs import Job, JobFailure, JobResult, JobSuccess
from keycase.options import CaseStyle, ConversionMode, ConversionOptions, InputType
from keycase.validation import JsonValidation, ValidationError, validate_json
from keycase.worker import ConversionWorker, WorkerConfig, should_use_worker

__version__: str = "0.1.0"
__all__: list[str] = [
    "CaseStyle",
    "ConversionMode",
    "ConversionOptions",
    "ConversionWorker",
    "DispatcherState",
    "InputType",
    "Job",
    "JobDispatcher",
    "JobFailure",
    "JobResult",
    "JobSuccess",
    "JsonValidation",
    "ValidationError",
    "WorkerConfig",
    "convert",
    "convert_async",
    "convert_csv",
    "convert_json",
    "convert_text",
    "handle_job",
    "should_use_worker",
    "validate_json",
]
