"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging
import contextlib
from typing import Any

from fastapi import WebSocket

from micstt.state import RuntimeDeps
from micstt.pipeline import PipelineWorker
from micstt.session import RecordingSession
from micstt.config.audio import AUDIO_BYTES_PER_SECOND
from micstt.state.connection import ConnectionState
from micstt.config.websocket import (
    WS_CLOSE_BUSY_CODE,
    WS_CLOSE_INTERNAL_CODE,
    WS_CLOSE_INTERNAL_REASON,
    WS_CLOSE_CAPACITY_REASON,
    WS_CLOSE_INFERENCE_REASON,
    WS_CLOSE_UNAUTHORIZED_CODE,
    WS_CLOSE_UNAUTHORIZED_REASON,
)

from .lifecycle import WebSocketLifecycle
from .auth import authenticate_websocket
from .message_loop import run_message_loop
from .errors import close_quietly, safe_send_json, reject_connection

logger = logging.getLogger(__name__)


def _max_recording_bytes(runtime_deps: RuntimeDeps) -> int:
    seconds = runtime_deps.settings.limits.max_recording_seconds
    if seconds <= 0:
        return 0
    return int(seconds * AUDIO_BYTES_PER_SECOND)


async def _prepare_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> bool:
    if not await authenticate_websocket(ws, expected_api_key=runtime_deps.settings.auth.api_key):
        logger.info("WebSocket rejected: authentication failed")
        await reject_connection(ws, close_code=WS_CLOSE_UNAUTHORIZED_CODE, reason=WS_CLOSE_UNAUTHORIZED_REASON)
        return False

    if not await runtime_deps.connections.connect(ws):
        logger.warning(
            "WebSocket rejected: at capacity (%s), rejected so far: %s",
            runtime_deps.connections.max_connections,
            runtime_deps.connections.rejected_count,
        )
        await reject_connection(ws, close_code=WS_CLOSE_BUSY_CODE, reason=WS_CLOSE_CAPACITY_REASON)
        return False

    try:
        await ws.accept()
    except Exception:
        with contextlib.suppress(Exception):
            await runtime_deps.connections.disconnect(ws)
        raise
    return True


def _build_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> ConnectionState:
    settings = runtime_deps.settings
    session = RecordingSession()
    lifecycle: WebSocketLifecycle | None = None

    async def emit(payload: dict[str, Any]) -> bool:
        if lifecycle is not None and lifecycle.should_close():
            return False
        return await safe_send_json(ws, payload)

    async def on_failure(_exc: Exception) -> None:
        if lifecycle is not None:
            await lifecycle.close(code=WS_CLOSE_INTERNAL_CODE, reason=WS_CLOSE_INFERENCE_REASON)

    worker = PipelineWorker(
        runtime_deps.orchestrator,
        emit=emit,
        on_failure=on_failure,
        queue_max=settings.limits.pipeline_queue_max,
    )
    lifecycle = WebSocketLifecycle(
        ws,
        is_busy_fn=lambda: session.is_recording or worker.busy,
        idle_timeout_s=settings.websocket.idle_timeout_s,
        watchdog_tick_s=settings.websocket.watchdog_tick_s,
    )
    return ConnectionState(
        ws=ws,
        session=session,
        worker=worker,
        lifecycle=lifecycle,
        max_recording_bytes=_max_recording_bytes(runtime_deps),
    )


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    conn: ConnectionState | None = None
    admitted = False
    client_code: int | None = None
    try:
        if not await _prepare_connection(ws, runtime_deps):
            return
        admitted = True

        conn = _build_connection(ws, runtime_deps)
        conn.lifecycle.start()

        logger.info("WebSocket connection accepted. Active: %s", runtime_deps.connections.get_connection_count())
        client_code = await run_message_loop(conn)
    except Exception:
        logger.exception("WebSocket handler failed")
        if conn is not None:
            await conn.lifecycle.close(code=WS_CLOSE_INTERNAL_CODE, reason=WS_CLOSE_INTERNAL_REASON)
        else:
            await close_quietly(ws, code=WS_CLOSE_INTERNAL_CODE, reason=WS_CLOSE_INTERNAL_REASON)
    finally:
        if conn is not None:
            with contextlib.suppress(Exception):
                await conn.worker.stop()
            with contextlib.suppress(Exception):
                await conn.lifecycle.stop()
            conn.session.reset()

        if admitted:
            lifetime_s: float | None = None
            with contextlib.suppress(Exception):
                lifetime_s = await runtime_deps.connections.disconnect(ws)
            logger.info(
                "WebSocket connection closed after %.1fs client_code=%s server_code=%s violations=%s. Active: %s",
                lifetime_s or 0.0,
                client_code,
                conn.lifecycle.close_code if conn is not None else None,
                conn.session.violations if conn is not None else 0,
                runtime_deps.connections.get_connection_count(),
            )


__all__ = ["handle_websocket_connection"]
