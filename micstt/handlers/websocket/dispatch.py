"""Dispatch handlers for classified client frames.

Each handler returns False when the connection is being closed and the
message loop should stop reading.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Awaitable

from micstt.state import ClientFrame
from micstt.errors import PipelineBusyError
from micstt.state.connection import ConnectionState
from micstt.config.websocket import (
    WS_CLOSE_BUSY_CODE,
    WS_CLOSE_BUSY_REASON,
    WS_CLOSE_TOO_LARGE_CODE,
    WS_CLOSE_TOO_LARGE_REASON,
)

logger = logging.getLogger(__name__)

HandlerFn = Callable[[ConnectionState, ClientFrame], Awaitable[bool]]


async def _handle_start(conn: ConnectionState, _frame: ClientFrame) -> bool:
    conn.session.begin()
    logger.debug("session: recording cycle=%s", conn.session.cycle_id)
    return True


async def _handle_end(conn: ConnectionState, _frame: ClientFrame) -> bool:
    cycle = conn.session.end()
    if cycle is None:
        return True
    try:
        conn.worker.submit(cycle)
    except PipelineBusyError as exc:
        logger.warning("session: %s recordings pending (limit %s); closing", exc.pending, exc.limit)
        await conn.lifecycle.close(code=WS_CLOSE_BUSY_CODE, reason=WS_CLOSE_BUSY_REASON)
        return False
    logger.debug("session: submitted cycle=%s audio_bytes=%s", cycle.cycle_id, cycle.pcm_bytes)
    return True


async def _handle_data(conn: ConnectionState, frame: ClientFrame) -> bool:
    if not conn.session.append(frame.data):
        return True
    if conn.max_recording_bytes > 0 and conn.session.recorded_bytes > conn.max_recording_bytes:
        logger.warning(
            "session: cycle=%s exceeded %s bytes; closing",
            conn.session.cycle_id,
            conn.max_recording_bytes,
        )
        conn.session.reset()
        await conn.lifecycle.close(code=WS_CLOSE_TOO_LARGE_CODE, reason=WS_CLOSE_TOO_LARGE_REASON)
        return False
    return True


async def _handle_unknown(conn: ConnectionState, frame: ClientFrame) -> bool:
    conn.session.violations += 1
    preview = (frame.text or "")[:64]
    logger.warning("session: ignoring unrecognized text frame %r", preview)
    return True


HANDLERS: dict[str, HandlerFn] = {
    "start": _handle_start,
    "end": _handle_end,
    "data": _handle_data,
    "unknown": _handle_unknown,
}

__all__ = ["HANDLERS", "HandlerFn"]
