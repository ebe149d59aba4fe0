"""ConversionWorker: runs jobs on a dedicated background thread.

The caller never blocks on a transformation.  Requests are handed to a
single-thread executor and the response envelope comes back through one of
three surfaces:

- ``submit(request)``               -> ``concurrent.futures.Future[JobResult]``
- ``await run(request)``            -> ``JobResult``
- ``post_message(request, callback)`` -> callback receives the response dict

With one worker thread, jobs are served strictly FIFO and each one runs to
completion before the next starts.  There is no cancellation and no internal
timeout: wrap ``run()`` in ``asyncio.wait_for`` to bound the wait and discard
late results.

Example::

    with ConversionWorker() as worker:
        worker.post_message(
            {"text": "user_name", "inputType": "text", "options": {}},
            print,
        )
    # {'type': 'success', 'result': 'userName'}
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from loguru import logger

from keycase.dispatcher import JobDispatcher
from keycase.jobs import Job, JobResult

__all__ = ["DEFAULT_OFFLOAD_THRESHOLD", "ConversionWorker", "WorkerConfig", "should_use_worker"]

# Payloads longer than this (in characters) are worth moving off the caller's thread
DEFAULT_OFFLOAD_THRESHOLD = 10_000

Request = Job | Mapping[str, Any]


def should_use_worker(text: str, threshold: int = DEFAULT_OFFLOAD_THRESHOLD) -> bool:
    """Return True if ``text`` is large enough to warrant background processing."""
    return len(text) > threshold


@dataclass(frozen=True, slots=True)
class WorkerConfig:
    """Immutable settings for a ConversionWorker.

    Attributes:
        offload_threshold: Payload size (characters) above which the
            convenience API routes jobs through a worker.  Must be >= 0.
        thread_name_prefix: Name prefix of the worker thread.
    """

    offload_threshold: int = DEFAULT_OFFLOAD_THRESHOLD
    thread_name_prefix: str = "keycase"

    def __post_init__(self) -> None:
        if self.offload_threshold < 0:
            msg = f"offload_threshold must be >= 0, got {self.offload_threshold}"
            raise ValueError(msg)


class ConversionWorker:
    """Background executor for conversion jobs.

    Each worker owns one thread and one ``JobDispatcher``; two workers never
    share state.  ``close()`` stops accepting jobs and, by default, waits for
    the queued ones to finish.

    Args:
        config: Worker settings.  Defaults to ``WorkerConfig()``.
    """

    def __init__(self, config: WorkerConfig | None = None) -> None:
        self._config: WorkerConfig = config if config is not None else WorkerConfig()
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix=self._config.thread_name_prefix
        )
        self._dispatcher = JobDispatcher()
        self._closed = False

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> WorkerConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def processed(self) -> int:
        """Jobs completed by this worker so far."""
        return self._dispatcher.processed

    # ------------------------------------------------------------------
    # Request surfaces
    # ------------------------------------------------------------------

    def submit(self, request: Request) -> Future[JobResult]:
        """Queue ``request`` and return a future for its result.

        Raises:
            RuntimeError: If the worker has been closed.
        """
        if self._closed:
            msg = "cannot submit a job to a closed ConversionWorker"
            raise RuntimeError(msg)
        return self._executor.submit(self._process, request)

    async def run(self, request: Request) -> JobResult:
        """Process ``request`` on the worker thread and await its result."""
        if self._closed:
            msg = "cannot submit a job to a closed ConversionWorker"
            raise RuntimeError(msg)
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self._process, request)

    def post_message(
        self,
        request: Request,
        callback: Callable[[dict[str, Any]], object],
    ) -> Future[JobResult]:
        """Queue ``request``; call ``callback`` with the response envelope dict.

        The callback runs on the worker thread once the job completes (or at
        once on the calling thread if the job has already finished).  An
        exception raised by the callback is logged, not propagated.
        """

        def _deliver(future: Future[JobResult]) -> None:
            try:
                callback(future.result().to_dict())
            except Exception:
                logger.exception("response callback raised")

        future = self.submit(request)
        future.add_done_callback(_deliver)
        return future

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self, wait: bool = True) -> None:
        """Stop accepting jobs; optionally wait for queued ones to finish."""
        if self._closed:
            return
        self._closed = True
        self._executor.shutdown(wait=wait)
        logger.debug(f"worker closed after {self._dispatcher.processed} jobs")

    def __enter__(self) -> ConversionWorker:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _process(self, request: Request) -> JobResult:
        # Runs on the worker thread only; the dispatcher is never shared
        self._dispatcher.receive(request)
        result = self._dispatcher.process_next()
        assert result is not None
        return result
