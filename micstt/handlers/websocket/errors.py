"""Safe send/close helpers for the client WebSocket."""

from __future__ import annotations

import logging
import contextlib
from typing import Any

import orjson
from fastapi import WebSocket, WebSocketDisconnect

logger = logging.getLogger(__name__)


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    try:
        await ws.send_text(text)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def safe_send_json(ws: WebSocket, payload: dict[str, Any]) -> bool:
    return await safe_send_text(ws, orjson.dumps(payload).decode("utf-8"))


async def close_quietly(ws: WebSocket, *, code: int, reason: str = "") -> None:
    with contextlib.suppress(Exception):
        await ws.close(code=code, reason=reason)


async def reject_connection(ws: WebSocket, *, close_code: int, reason: str) -> None:
    # Accept first so the client sees the close code and reason instead of a failed upgrade.
    try:
        await ws.accept()
    except Exception:
        return
    await close_quietly(ws, code=close_code, reason=reason)


__all__ = ["close_quietly", "reject_connection", "safe_send_json", "safe_send_text"]
