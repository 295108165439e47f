"""Per-connection state shared by the WebSocket message handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from dataclasses import dataclass

if TYPE_CHECKING:
    from micstt.pipeline import PipelineWorker
    from micstt.session import RecordingSession
    from micstt.handlers.websocket.lifecycle import WebSocketLifecycle


@dataclass(slots=True)
class ConnectionState:
    ws: Any
    session: RecordingSession
    worker: PipelineWorker
    lifecycle: WebSocketLifecycle
    max_recording_bytes: int = 0


__all__ = ["ConnectionState"]
