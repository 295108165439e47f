from __future__ import annotations

import asyncio

import pytest

from micstt.handlers.websocket.lifecycle import WebSocketLifecycle
from micstt.config.websocket import WS_CLOSE_IDLE_CODE, WS_CLOSE_IDLE_REASON


class _FakeWebSocket:
    def __init__(self) -> None:
        self.closed = asyncio.Event()
        self.close_calls = 0
        self.close_code: int | None = None
        self.close_reason: str | None = None

    async def close(self, *, code: int = 1000, reason: str | None = None) -> None:
        self.close_calls += 1
        self.close_code = code
        self.close_reason = reason or ""
        self.closed.set()


@pytest.mark.asyncio
async def test_websocket_lifecycle_closes_when_idle() -> None:
    ws = _FakeWebSocket()
    lifecycle = WebSocketLifecycle(ws, idle_timeout_s=0.05, watchdog_tick_s=0.01)
    lifecycle.start()

    await asyncio.wait_for(ws.closed.wait(), timeout=1.0)
    assert ws.close_code == WS_CLOSE_IDLE_CODE
    assert ws.close_reason == WS_CLOSE_IDLE_REASON
    assert lifecycle.should_close()

    await lifecycle.stop()


@pytest.mark.asyncio
async def test_websocket_lifecycle_not_idle_while_busy() -> None:
    ws = _FakeWebSocket()
    busy = True
    lifecycle = WebSocketLifecycle(ws, is_busy_fn=lambda: busy, idle_timeout_s=0.02, watchdog_tick_s=0.01)
    lifecycle.start()

    await asyncio.sleep(0.1)
    assert not ws.closed.is_set()

    busy = False
    await asyncio.wait_for(ws.closed.wait(), timeout=1.0)
    await lifecycle.stop()


@pytest.mark.asyncio
async def test_websocket_lifecycle_idle_disabled() -> None:
    ws = _FakeWebSocket()
    lifecycle = WebSocketLifecycle(ws, idle_timeout_s=0, watchdog_tick_s=0.01)
    lifecycle.start()

    await asyncio.sleep(0.05)
    assert not ws.closed.is_set()
    await lifecycle.stop()
    assert lifecycle.should_close()


@pytest.mark.asyncio
async def test_websocket_lifecycle_close_is_idempotent() -> None:
    ws = _FakeWebSocket()
    lifecycle = WebSocketLifecycle(ws, idle_timeout_s=0, watchdog_tick_s=0.01)

    await lifecycle.close(code=1011, reason="inference failed")
    await lifecycle.close(code=1000)

    assert ws.close_calls == 1
    assert ws.close_code == 1011
    assert lifecycle.close_code == 1011
