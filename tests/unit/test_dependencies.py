from __future__ import annotations

import logging

import pytest

from micstt.runtime.logging import configure_logging
from micstt.runtime.settings import load_settings
from micstt.runtime.dependencies import build_http_client, build_runtime_deps


@pytest.mark.asyncio
async def test_build_runtime_deps(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLOUDFLARE_ACCOUNT_ID", "acct")
    monkeypatch.setenv("CLOUDFLARE_API_TOKEN", "tok")
    monkeypatch.setenv("MAX_CONCURRENT_CONNECTIONS", "7")

    deps = await build_runtime_deps()
    try:
        assert deps.connections.max_connections == 7
        assert deps.settings.inference.account_id == "acct"
        assert deps._http_client.headers["authorization"] == "Bearer tok"
    finally:
        await deps.shutdown()
    assert deps._http_client.is_closed


@pytest.mark.asyncio
async def test_build_http_client_without_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CLOUDFLARE_API_TOKEN", raising=False)
    client = build_http_client(load_settings())
    async with client:
        assert "authorization" not in client.headers
        assert str(client.base_url).startswith("https://api.cloudflare.com/client/v4")


def test_configure_logging_quiets_httpx(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SHOW_HTTPX_LOGS", raising=False)
    configure_logging()
    assert logging.getLogger("httpx").level == logging.WARNING
