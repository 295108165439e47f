"""Classify raw ASGI WebSocket messages into client frames."""

from __future__ import annotations

from typing import Any
from collections.abc import Mapping

from micstt.state import ClientFrame
from micstt.config.websocket import WS_MSG_END, WS_MSG_START


def parse_client_frame(message: Mapping[str, Any]) -> ClientFrame:
    msg_type = message.get("type")
    if msg_type == "websocket.disconnect":
        return ClientFrame(kind="disconnect", close_code=message.get("code"))
    if msg_type != "websocket.receive":
        return ClientFrame(kind="unknown", text=str(msg_type))

    data = message.get("bytes")
    if data is not None:
        return ClientFrame(kind="data", data=bytes(data))

    text = message.get("text")
    if text == WS_MSG_START:
        return ClientFrame(kind="start", text=text)
    if text == WS_MSG_END:
        return ClientFrame(kind="end", text=text)
    return ClientFrame(kind="unknown", text=text)


__all__ = ["parse_client_frame"]
