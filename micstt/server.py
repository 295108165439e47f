"""Main FastAPI server for the microphone transcription/completion endpoint."""

from __future__ import annotations

import os
import logging
from contextlib import asynccontextmanager
from collections.abc import Callable, Awaitable

import uvicorn
from fastapi import FastAPI, WebSocket
from fastapi.responses import ORJSONResponse

from micstt.state import RuntimeDeps
from micstt.config.websocket import WS_ENDPOINT_PATH
from micstt.runtime.logging import configure_logging
from micstt.runtime.dependencies import build_runtime_deps
from micstt.handlers.websocket.manager import handle_websocket_connection
from micstt.config.server import ENV_HOST, ENV_PORT, DEFAULT_HOST, DEFAULT_PORT

logger = logging.getLogger(__name__)

configure_logging()

DepsFactory = Callable[[], Awaitable[RuntimeDeps]]


def create_app(deps_factory: DepsFactory = build_runtime_deps) -> FastAPI:
    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        runtime_deps = await deps_factory()
        app.state.runtime_deps = runtime_deps
        logger.info("runtime: ready")
        try:
            yield
        finally:
            deps = getattr(app.state, "runtime_deps", None)
            if deps is not None:
                await deps.shutdown()

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.websocket(WS_ENDPOINT_PATH)
    async def websocket_endpoint(websocket: WebSocket) -> None:
        runtime_deps = getattr(app.state, "runtime_deps", None)
        if runtime_deps is None:
            raise RuntimeError("Runtime dependencies are not initialized")
        await handle_websocket_connection(websocket, runtime_deps)

    return app


app = create_app()


def main() -> None:
    host = (os.getenv(ENV_HOST) or DEFAULT_HOST).strip()
    try:
        port = int(os.getenv(ENV_PORT) or DEFAULT_PORT)
    except ValueError:
        port = DEFAULT_PORT
    uvicorn.run(app, host=host, port=port, log_config=None)


__all__ = ["app", "create_app", "main"]
