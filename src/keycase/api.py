"""Public API functions for keycase.

The ``convert_*`` helpers raise on bad input like any Python function.
``convert`` and ``convert_async`` follow the job contract instead: they always
return a ``JobSuccess`` or ``JobFailure`` and never raise for a failed job.
"""

from __future__ import annotations

import atexit
import dataclasses
from threading import Lock
from typing import Any

from keycase.csv_headers import convert_csv_headers
from keycase.dispatcher import handle_job
from keycase.jobs import JobResult
from keycase.options import ConversionOptions, InputType
from keycase.text.pipeline import convert_lines
from keycase.tree.transformer import JsonKeyTransformer
from keycase.worker import ConversionWorker, WorkerConfig, should_use_worker

__all__ = [
    "convert",
    "convert_async",
    "convert_csv",
    "convert_json",
    "convert_text",
    "get_default_worker",
]

_default_worker: ConversionWorker | None = None
_default_worker_lock = Lock()


def _resolve(options: ConversionOptions | None, overrides: dict[str, Any]) -> ConversionOptions:
    base = options if options is not None else ConversionOptions()
    return dataclasses.replace(base, **overrides) if overrides else base


def _request(
    text: str, input_type: InputType | str, options: ConversionOptions | None
) -> dict[str, Any]:
    # Decoded inside the dispatcher so malformed arguments become a JobFailure
    return {
        "text": text,
        "inputType": input_type,
        "options": (options if options is not None else ConversionOptions()).to_dict(),
    }


def convert_text(text: str, options: ConversionOptions | None = None, **overrides: Any) -> str:
    """Convert plain text line by line.

    Args:
        text:        Payload; each ``\\n``-separated line is converted alone.
        options:     Conversion settings.  Defaults to ``ConversionOptions()``.
        **overrides: Individual option fields replacing those in ``options``,
                     e.g. ``case_style=CaseStyle.PASCAL``.

    Returns:
        The converted text.
    """
    return convert_lines(text, _resolve(options, overrides))


def convert_json(value: Any, options: ConversionOptions | None = None, **overrides: Any) -> Any:
    """Return a copy of a decoded JSON value with its object keys converted.

    Args:
        value:       A value as produced by ``json.loads``.
        options:     Conversion settings.  Defaults to ``ConversionOptions()``.
        **overrides: Individual option fields replacing those in ``options``.

    Raises:
        TypeError: If ``value`` contains a non-JSON Python object.
    """
    return JsonKeyTransformer(_resolve(options, overrides)).transform(value)


def convert_csv(csv: str, options: ConversionOptions | None = None, **overrides: Any) -> str:
    """Convert the header line of a CSV payload; data rows are untouched."""
    return convert_csv_headers(csv, _resolve(options, overrides))


def convert(
    text: str,
    input_type: InputType | str = InputType.TEXT,
    options: ConversionOptions | None = None,
) -> JobResult:
    """Run one job synchronously on the calling thread.

    Returns:
        ``JobSuccess`` or ``JobFailure``; a malformed JSON payload is reported
        as a failure, not raised.
    """
    return handle_job(_request(text, input_type, options))


def get_default_worker() -> ConversionWorker:
    """Return the process-wide worker, creating it on first use."""
    global _default_worker
    with _default_worker_lock:
        if _default_worker is None or _default_worker.closed:
            _default_worker = ConversionWorker()
            atexit.register(_default_worker.close)
        return _default_worker


async def convert_async(
    text: str,
    input_type: InputType | str = InputType.TEXT,
    options: ConversionOptions | None = None,
    worker: ConversionWorker | None = None,
) -> JobResult:
    """Run one job without blocking the event loop on large payloads.

    Payloads above the worker's offload threshold are processed on the worker
    thread (the process-wide default worker unless ``worker`` is given);
    smaller ones are handled inline.

    Returns:
        ``JobSuccess`` or ``JobFailure``.
    """
    request = _request(text, input_type, options)
    config = worker.config if worker is not None else WorkerConfig()
    if isinstance(text, str) and not should_use_worker(text, config.offload_threshold):
        return handle_job(request)
    target = worker if worker is not None else get_default_worker()
    return await target.run(request)
