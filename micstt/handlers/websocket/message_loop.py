"""WebSocket message loop for the microphone endpoint (/ws)."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from fastapi import WebSocketDisconnect

from micstt.state.connection import ConnectionState

from .dispatch import HANDLERS
from .parser import parse_client_frame

logger = logging.getLogger(__name__)


async def _recv_message_with_watchdog(conn: ConnectionState) -> tuple[dict[str, Any] | None, bool]:
    try:
        message = await asyncio.wait_for(
            conn.ws.receive(),
            timeout=conn.lifecycle.watchdog_tick_s * 2,
        )
        return message, False
    except TimeoutError:
        return None, conn.lifecycle.should_close()


async def run_message_loop(conn: ConnectionState) -> int | None:
    """Read frames until the client disconnects or the server closes the socket.

    Returns the client's close code when the client disconnected, else None.
    """
    try:
        while True:
            message, should_exit = await _recv_message_with_watchdog(conn)
            if should_exit:
                return None
            if message is None:
                continue

            frame = parse_client_frame(message)
            if frame.kind == "disconnect":
                logger.debug("WebSocket client disconnected code=%s", frame.close_code)
                return frame.close_code

            conn.lifecycle.touch()

            handler = HANDLERS[frame.kind]
            if not await handler(conn, frame):
                return None
            if conn.lifecycle.should_close():
                return None
    except WebSocketDisconnect as exc:
        return exc.code


__all__ = ["run_message_loop"]
