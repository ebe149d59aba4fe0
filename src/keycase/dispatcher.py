"""Job dispatch: route a request by input type and wrap the outcome.

``handle_job`` is a pure function from a request to a response with no
module-level state, so any transport can drive it: the background
``ConversionWorker``, the HTTP app, or a direct call in tests.

Routing:
- json -> parse, convert object keys, serialize (indented or compact)
- csv  -> convert the header line only
- else -> convert the payload line by line

Every failure, including decoding the request itself, is caught at this
boundary and returned as a ``JobFailure``.  Nothing raised while handling a
job escapes to the caller.

``JobDispatcher`` adds a FIFO inbox and an observable state machine
(IDLE -> RECEIVED -> PROCESSING -> COMPLETED -> IDLE) around ``handle_job``.
"""

from __future__ import annotations

import json
import re
import time
from collections import deque
from collections.abc import Mapping
from enum import StrEnum, auto
from typing import Any

from loguru import logger

from keycase.csv_headers import convert_csv_headers
from keycase.jobs import Job, JobFailure, JobResult, JobSuccess
from keycase.options import InputType
from keycase.text.pipeline import convert_lines
from keycase.tree.transformer import JsonKeyTransformer
from keycase.validation import load_json

__all__ = ["DispatcherState", "JobDispatcher", "handle_job", "run_job"]


_LONE_SURROGATE = re.compile(r"[\ud800-\udfff]")


def _escape_surrogate(match: re.Match[str]) -> str:
    return f"\\u{ord(match.group()):04x}"


def _serialize(value: Any, pretty: bool) -> str:
    if pretty:
        out = json.dumps(value, indent=2, ensure_ascii=False, allow_nan=False)
    else:
        out = json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    # Surrogates only occur inside string literals; keep the output UTF-8 encodable
    return _LONE_SURROGATE.sub(_escape_surrogate, out)


def run_job(job: Job) -> str:
    """Process ``job`` and return the output text.

    Unlike ``handle_job`` this raises on failure.

    Raises:
        json.JSONDecodeError: If a json job's payload does not parse.
        ValueError: If a json job's payload uses a ``NaN`` or ``Infinity`` literal.
    """
    if job.input_type == InputType.JSON:
        parsed = load_json(job.text)
        converted = JsonKeyTransformer(job.options).transform(parsed)
        return _serialize(converted, job.options.pretty_print)
    if job.input_type == InputType.CSV:
        return convert_csv_headers(job.text, job.options)
    return convert_lines(job.text, job.options)


def _error_message(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


def handle_job(request: Job | Mapping[str, Any]) -> JobResult:
    """Process one request and return exactly one result.

    Args:
        request: A ``Job`` or a request envelope dict
                 (``{"text", "inputType", "options"}``).

    Returns:
        ``JobSuccess(result)`` or ``JobFailure(error)``; never raises for a
        failure inside the job.
    """
    try:
        job = request if isinstance(request, Job) else Job.from_dict(request)
        return JobSuccess(result=run_job(job))
    except Exception as exc:
        logger.opt(exception=exc).debug(f"job failed: {type(exc).__name__}: {exc}")
        return JobFailure(error=_error_message(exc))


class DispatcherState(StrEnum):
    """Lifecycle of the job currently held by a JobDispatcher."""

    IDLE = auto()
    RECEIVED = auto()
    PROCESSING = auto()
    COMPLETED = auto()


class JobDispatcher:
    """Serial job processor with a FIFO inbox.

    One job is in flight at a time.  Jobs received while another is being
    processed wait in the inbox and are served strictly in receipt order.
    Each job runs to completion; there is no cancellation.

    Not thread-safe on its own: ``ConversionWorker`` confines each dispatcher
    to a single worker thread.

    Example::

        dispatcher = JobDispatcher()
        dispatcher.receive({"text": "user_name", "inputType": "text", "options": {}})
        dispatcher.process_next()   # JobSuccess(result="userName")
    """

    def __init__(self) -> None:
        self._inbox: deque[Job | Mapping[str, Any]] = deque()
        self._state = DispatcherState.IDLE
        self._processed = 0
        self._failed = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def state(self) -> DispatcherState:
        return self._state

    @property
    def pending(self) -> int:
        """Number of received jobs not yet processed."""
        return len(self._inbox)

    @property
    def processed(self) -> int:
        """Number of jobs completed, successful or not."""
        return self._processed

    @property
    def failed(self) -> int:
        """Number of completed jobs that produced a JobFailure."""
        return self._failed

    # ------------------------------------------------------------------
    # Job lifecycle
    # ------------------------------------------------------------------

    def receive(self, request: Job | Mapping[str, Any]) -> None:
        """Queue ``request`` behind any jobs already received."""
        self._inbox.append(request)
        if self._state == DispatcherState.IDLE:
            self._state = DispatcherState.RECEIVED

    def process_next(self) -> JobResult | None:
        """Process the oldest queued job; return None if the inbox is empty."""
        if not self._inbox:
            return None

        request = self._inbox.popleft()
        self._state = DispatcherState.PROCESSING
        t0 = time.perf_counter()
        result = handle_job(request)
        elapsed_ms = (time.perf_counter() - t0) * 1000

        self._processed += 1
        self._state = DispatcherState.COMPLETED
        if isinstance(result, JobFailure):
            self._failed += 1
            logger.warning(f"job #{self._processed} failed in {elapsed_ms:.2f}ms: {result.error}")
        else:
            logger.debug(
                f"job #{self._processed} completed in {elapsed_ms:.2f}ms, "
                f"{len(result.result)} chars out"
            )

        self._state = DispatcherState.RECEIVED if self._inbox else DispatcherState.IDLE
        return result

    def dispatch(self, request: Job | Mapping[str, Any]) -> JobResult:
        """Receive ``request``, drain the inbox and return the result for ``request``.

        Jobs queued earlier are processed first; their results are only logged.
        """
        self.receive(request)
        return self.drain()[-1]

    def drain(self) -> list[JobResult]:
        """Process every queued job in receipt order and return the results."""
        results: list[JobResult] = []
        while self._inbox:
            result = self.process_next()
            assert result is not None
            results.append(result)
        return results
