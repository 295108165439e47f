"""Cloudflare Workers AI REST client for the transcription and completion steps."""

from __future__ import annotations

import logging
from typing import Any

import httpx
import orjson

from micstt.errors import InferenceError
from micstt.config.inference import LLM_USER_ROLE

logger = logging.getLogger(__name__)

_STAGE_TRANSCRIPTION = "transcription"
_STAGE_COMPLETION = "completion"


def _describe_errors(body: dict[str, Any]) -> str:
    errors = body.get("errors")
    if isinstance(errors, list) and errors:
        parts = []
        for err in errors:
            if isinstance(err, dict):
                parts.append(str(err.get("message") or err.get("code") or err))
            else:
                parts.append(str(err))
        return "; ".join(parts)
    return "request unsuccessful"


class WorkersAIClient:
    """Run Workers AI models over ``POST /accounts/{account_id}/ai/run/{model}``.

    The ``httpx.AsyncClient`` is owned by the caller and is expected to carry the
    base URL, the bearer token and the request timeout.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        account_id: str,
        stt_model: str,
        llm_model: str,
    ) -> None:
        self._client = client
        self._account_id = account_id
        self._stt_model = stt_model
        self._llm_model = llm_model

    def _run_path(self, model: str) -> str:
        return f"/accounts/{self._account_id}/ai/run/{model}"

    async def _run(self, stage: str, model: str, *, content: bytes, content_type: str) -> dict[str, Any]:
        logger.debug("workers-ai: %s model=%s request_bytes=%s", stage, model, len(content))
        try:
            resp = await self._client.post(
                self._run_path(model),
                content=content,
                headers={"Content-Type": content_type},
            )
        except httpx.HTTPError as exc:
            raise InferenceError(stage=stage, message=f"request failed: {exc!r}") from exc

        try:
            body = orjson.loads(resp.content)
        except orjson.JSONDecodeError:
            body = None

        if resp.is_error:
            detail = _describe_errors(body) if isinstance(body, dict) else resp.reason_phrase
            raise InferenceError(stage=stage, message=detail, status_code=resp.status_code)
        if not isinstance(body, dict):
            raise InferenceError(stage=stage, message="response is not a JSON object", status_code=resp.status_code)
        if body.get("success") is False:
            raise InferenceError(stage=stage, message=_describe_errors(body), status_code=resp.status_code)

        result = body.get("result")
        if not isinstance(result, dict):
            raise InferenceError(stage=stage, message="response missing 'result'", status_code=resp.status_code)
        return result

    async def transcribe(self, wav: bytes) -> str:
        result = await self._run(
            _STAGE_TRANSCRIPTION,
            self._stt_model,
            content=wav,
            content_type="application/octet-stream",
        )
        text = result.get("text")
        if not isinstance(text, str):
            raise InferenceError(stage=_STAGE_TRANSCRIPTION, message="result missing 'text'")
        return text

    async def complete(self, prompt: str) -> str:
        payload = {"messages": [{"role": LLM_USER_ROLE, "content": prompt}]}
        result = await self._run(
            _STAGE_COMPLETION,
            self._llm_model,
            content=orjson.dumps(payload),
            content_type="application/json",
        )
        response = result.get("response")
        if not isinstance(response, str):
            raise InferenceError(stage=_STAGE_COMPLETION, message="result missing 'response'")
        return response


__all__ = ["WorkersAIClient"]
