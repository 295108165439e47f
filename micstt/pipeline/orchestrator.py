"""Two-step inference pipeline: transcription, then completion."""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Callable, Awaitable

from micstt.state import PipelineResult, RecordingCycle
from micstt.errors import InferenceError, TransportClosedError
from micstt.config.websocket import WS_KEY_CTX, WS_KEY_TEXT, WS_CTX_REQUEST, WS_CTX_RESPONSE

logger = logging.getLogger(__name__)

EmitFn = Callable[[dict[str, Any]], Awaitable[bool]]


def _require_text(stage: str, value: Any) -> str:
    if not isinstance(value, str):
        raise InferenceError(stage=stage, message=f"expected text, got {type(value).__name__}")
    return value


class PipelineOrchestrator:
    """Run one recording cycle through the transcriber and the responder.

    ``transcriber.transcribe(wav) -> str`` and ``responder.complete(prompt) -> str``
    are the collaborators. Results go to the client through ``emit``, which returns
    False once the transport is gone. Nothing is emitted for a stage that failed or
    for any stage after it.
    """

    def __init__(self, *, transcriber: Any, responder: Any) -> None:
        self._transcriber = transcriber
        self._responder = responder

    async def run(self, cycle: RecordingCycle, emit: EmitFn) -> PipelineResult:
        transcript = _require_text("transcription", await self._transcriber.transcribe(cycle.wav))
        logger.debug("pipeline: cycle=%s transcript chars=%s", cycle.cycle_id, len(transcript))
        if not await emit({WS_KEY_CTX: WS_CTX_REQUEST, WS_KEY_TEXT: transcript}):
            raise TransportClosedError(f"cycle {cycle.cycle_id}: client gone before transcript")

        completion = _require_text("completion", await self._responder.complete(transcript))
        logger.debug("pipeline: cycle=%s completion chars=%s", cycle.cycle_id, len(completion))
        if not await emit({WS_KEY_CTX: WS_CTX_RESPONSE, WS_KEY_TEXT: completion}):
            raise TransportClosedError(f"cycle {cycle.cycle_id}: client gone before completion")

        return PipelineResult(transcript=transcript, completion=completion)


__all__ = ["EmitFn", "PipelineOrchestrator"]
