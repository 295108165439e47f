"""WebSocket connection admission control."""

from __future__ import annotations

import time
import asyncio
from typing import Any


class ConnectionManager:
    """Process-wide cap on admitted microphone sessions.

    Admission happens before the WebSocket is accepted, so a refused client
    never gets a session.
    """

    def __init__(self, *, max_connections: int) -> None:
        self._max = max(1, int(max_connections))
        self._lock = asyncio.Lock()
        self._admitted_at: dict[int, float] = {}
        self._rejected = 0

    @property
    def max_connections(self) -> int:
        return self._max

    @property
    def rejected_count(self) -> int:
        return self._rejected

    async def connect(self, ws: Any) -> bool:
        async with self._lock:
            if len(self._admitted_at) >= self._max:
                self._rejected += 1
                return False
            self._admitted_at[id(ws)] = time.monotonic()
            return True

    async def disconnect(self, ws: Any) -> float | None:
        """Release a slot; returns how long the connection was admitted, in seconds."""
        async with self._lock:
            admitted_at = self._admitted_at.pop(id(ws), None)
        if admitted_at is None:
            return None
        return time.monotonic() - admitted_at

    def get_connection_count(self) -> int:
        return len(self._admitted_at)


__all__ = ["ConnectionManager"]
