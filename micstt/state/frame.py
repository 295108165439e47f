"""Classified inbound WebSocket frames (dataclasses only)."""

from __future__ import annotations

from typing import Literal
from dataclasses import dataclass

FrameKind = Literal["start", "end", "data", "unknown", "disconnect"]


@dataclass(frozen=True, slots=True)
class ClientFrame:
    kind: FrameKind
    data: bytes = b""
    text: str | None = None
    close_code: int | None = None


__all__ = ["ClientFrame", "FrameKind"]
