from __future__ import annotations

import pytest

from micstt.handlers.connections import ConnectionManager


@pytest.mark.asyncio
async def test_connection_manager_enforces_capacity() -> None:
    manager = ConnectionManager(max_connections=2)
    a, b, c = object(), object(), object()

    assert await manager.connect(a)
    assert await manager.connect(b)
    assert not await manager.connect(c)
    assert manager.get_connection_count() == 2
    assert manager.rejected_count == 1

    await manager.disconnect(a)
    assert await manager.connect(c)
    assert manager.get_connection_count() == 2


@pytest.mark.asyncio
async def test_connection_manager_disconnect_unknown_is_noop() -> None:
    manager = ConnectionManager(max_connections=1)
    await manager.disconnect(object())
    assert manager.get_connection_count() == 0


@pytest.mark.asyncio
async def test_connection_manager_reports_lifetime() -> None:
    manager = ConnectionManager(max_connections=1)
    ws = object()
    assert await manager.connect(ws)
    lifetime = await manager.disconnect(ws)
    assert lifetime is not None and lifetime >= 0.0
    assert manager.rejected_count == 0
