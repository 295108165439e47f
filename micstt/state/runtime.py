"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from micstt.state.settings import AppSettings
    from micstt.handlers.connections import ConnectionManager
    from micstt.pipeline.orchestrator import PipelineOrchestrator


@dataclass(slots=True)
class RuntimeDeps:
    connections: ConnectionManager
    orchestrator: PipelineOrchestrator
    settings: AppSettings
    _http_client: Any = None

    async def shutdown(self) -> None:
        if self._http_client is None:
            return
        try:
            await self._http_client.aclose()
        except Exception:
            logger.exception("runtime shutdown failed")


__all__ = ["RuntimeDeps"]
