"""Runtime dependency construction (Workers AI client + admission control)."""

from __future__ import annotations

import logging

import httpx

from micstt.state import AppSettings, RuntimeDeps
from micstt.inference import WorkersAIClient
from micstt.pipeline import PipelineOrchestrator
from micstt.handlers.connections import ConnectionManager

from .settings import load_settings

logger = logging.getLogger(__name__)


def build_http_client(settings: AppSettings) -> httpx.AsyncClient:
    inference = settings.inference
    headers = {"Authorization": f"Bearer {inference.api_token}"} if inference.api_token else {}
    return httpx.AsyncClient(
        base_url=inference.base_url,
        headers=headers,
        timeout=httpx.Timeout(inference.timeout_s),
    )


async def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()
    inference = settings.inference

    if not inference.account_id or not inference.api_token:
        logger.warning("workers-ai: CLOUDFLARE_ACCOUNT_ID/CLOUDFLARE_API_TOKEN not set; inference calls will fail")

    http_client = build_http_client(settings)
    client = WorkersAIClient(
        http_client,
        account_id=inference.account_id,
        stt_model=inference.stt_model,
        llm_model=inference.llm_model,
    )
    logger.info("workers-ai: stt_model=%s llm_model=%s", inference.stt_model, inference.llm_model)

    return RuntimeDeps(
        connections=ConnectionManager(max_connections=settings.limits.max_concurrent_connections),
        orchestrator=PipelineOrchestrator(transcriber=client, responder=client),
        settings=settings,
        _http_client=http_client,
    )


__all__ = ["RuntimeDeps", "build_http_client", "build_runtime_deps"]
