"""Per-connection pipeline queue.

Finished recordings are processed strictly one at a time in submission order,
so each cycle's transcript/completion pair reaches the client before the next
cycle's transcript. The message loop never waits on inference.
"""

from __future__ import annotations

import asyncio
import logging
import contextlib
from collections.abc import Callable, Awaitable

from micstt.state import RecordingCycle
from micstt.errors import InferenceError, PipelineBusyError, TransportClosedError

from .orchestrator import EmitFn, PipelineOrchestrator

logger = logging.getLogger(__name__)

FailureFn = Callable[[Exception], Awaitable[None]]


class PipelineWorker:
    def __init__(
        self,
        orchestrator: PipelineOrchestrator,
        *,
        emit: EmitFn,
        on_failure: FailureFn,
        queue_max: int = 0,
    ) -> None:
        self._orchestrator = orchestrator
        self._emit = emit
        self._on_failure = on_failure
        self._queue_max = max(0, int(queue_max))
        self._queue: asyncio.Queue[RecordingCycle] = asyncio.Queue()
        self._task: asyncio.Task | None = None
        self._in_flight: RecordingCycle | None = None
        self._stopped = False

    @property
    def pending(self) -> int:
        return self._queue.qsize() + (1 if self._in_flight is not None else 0)

    @property
    def busy(self) -> bool:
        return self.pending > 0

    @property
    def stopped(self) -> bool:
        return self._stopped

    def submit(self, cycle: RecordingCycle) -> bool:
        """Queue a finished recording; returns False if the worker has already shut down."""
        if self._stopped:
            logger.debug("pipeline: dropping cycle=%s, worker stopped", cycle.cycle_id)
            return False
        if self._queue_max and self.pending >= self._queue_max:
            raise PipelineBusyError(pending=self.pending, limit=self._queue_max)
        self._queue.put_nowait(cycle)
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._run_loop())
        return True

    async def stop(self) -> None:
        """Abandon queued and in-flight cycles; late results are discarded."""
        self._stopped = True
        task, self._task = self._task, None
        if task is not None and task is not asyncio.current_task():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError, Exception):
                await task
        while not self._queue.empty():
            self._queue.get_nowait()
        self._in_flight = None

    async def _fail(self, exc: Exception) -> None:
        self._stopped = True
        while not self._queue.empty():
            self._queue.get_nowait()
        await self._on_failure(exc)

    async def _run_loop(self) -> None:
        while not self._stopped:
            cycle = await self._queue.get()
            self._in_flight = cycle
            try:
                result = await self._orchestrator.run(cycle, self._emit)
            except TransportClosedError as exc:
                logger.info("pipeline: abandoning cycle=%s (%s)", cycle.cycle_id, exc)
                self._stopped = True
                return
            except InferenceError as exc:
                logger.warning("pipeline: cycle=%s failed: %s", cycle.cycle_id, exc)
                await self._fail(exc)
                return
            except Exception as exc:
                logger.exception("pipeline: cycle=%s crashed", cycle.cycle_id)
                await self._fail(exc)
                return
            finally:
                self._in_flight = None
            logger.info(
                "pipeline: cycle=%s done audio_bytes=%s transcript_chars=%s completion_chars=%s",
                cycle.cycle_id,
                cycle.pcm_bytes,
                len(result.transcript),
                len(result.completion),
            )


__all__ = ["PipelineWorker"]
