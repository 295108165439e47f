from __future__ import annotations

from typing import Any

import pytest

from micstt.audio import encode_wav
from micstt.state import RecordingCycle
from micstt.pipeline import PipelineOrchestrator
from micstt.errors import InferenceError, TransportClosedError


class _Transcriber:
    def __init__(self, text: Any = "hello there", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[bytes] = []

    async def transcribe(self, wav: bytes) -> Any:
        self.calls.append(wav)
        if self.error is not None:
            raise self.error
        return self.text


class _Responder:
    def __init__(self, text: Any = "general kenobi", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> Any:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


class _Emitter:
    def __init__(self, ok: bool = True) -> None:
        self.ok = ok
        self.sent: list[dict[str, Any]] = []

    async def __call__(self, payload: dict[str, Any]) -> bool:
        self.sent.append(payload)
        return self.ok


def _cycle() -> RecordingCycle:
    pcm = b"\x01\x00" * 8
    return RecordingCycle(cycle_id=1, wav=encode_wav(pcm, len(pcm)), pcm_bytes=len(pcm))


@pytest.mark.asyncio
async def test_orchestrator_emits_request_then_response() -> None:
    transcriber, responder, emit = _Transcriber(), _Responder(), _Emitter()
    orchestrator = PipelineOrchestrator(transcriber=transcriber, responder=responder)
    cycle = _cycle()

    result = await orchestrator.run(cycle, emit)

    assert transcriber.calls == [cycle.wav]
    assert responder.prompts == ["hello there"]
    assert emit.sent == [
        {"ctx": "request", "text": "hello there"},
        {"ctx": "response", "text": "general kenobi"},
    ]
    assert result.transcript == "hello there"
    assert result.completion == "general kenobi"


@pytest.mark.asyncio
async def test_orchestrator_empty_transcript_is_forwarded() -> None:
    responder, emit = _Responder(), _Emitter()
    orchestrator = PipelineOrchestrator(transcriber=_Transcriber(text=""), responder=responder)

    await orchestrator.run(_cycle(), emit)

    assert responder.prompts == [""]
    assert emit.sent[0] == {"ctx": "request", "text": ""}


@pytest.mark.asyncio
async def test_orchestrator_transcription_failure_emits_nothing() -> None:
    responder, emit = _Responder(), _Emitter()
    orchestrator = PipelineOrchestrator(
        transcriber=_Transcriber(error=InferenceError(stage="transcription", message="boom")),
        responder=responder,
    )

    with pytest.raises(InferenceError):
        await orchestrator.run(_cycle(), emit)
    assert emit.sent == []
    assert responder.prompts == []


@pytest.mark.asyncio
async def test_orchestrator_completion_failure_keeps_request_only() -> None:
    emit = _Emitter()
    orchestrator = PipelineOrchestrator(
        transcriber=_Transcriber(),
        responder=_Responder(error=InferenceError(stage="completion", message="boom", status_code=502)),
    )

    with pytest.raises(InferenceError) as exc:
        await orchestrator.run(_cycle(), emit)
    assert exc.value.status_code == 502
    assert emit.sent == [{"ctx": "request", "text": "hello there"}]


@pytest.mark.asyncio
async def test_orchestrator_rejects_non_text_results() -> None:
    emit = _Emitter()
    orchestrator = PipelineOrchestrator(transcriber=_Transcriber(text=None), responder=_Responder())

    with pytest.raises(InferenceError) as exc:
        await orchestrator.run(_cycle(), emit)
    assert exc.value.stage == "transcription"
    assert emit.sent == []


@pytest.mark.asyncio
async def test_orchestrator_stops_when_transport_gone() -> None:
    responder, emit = _Responder(), _Emitter(ok=False)
    orchestrator = PipelineOrchestrator(transcriber=_Transcriber(), responder=responder)

    with pytest.raises(TransportClosedError):
        await orchestrator.run(_cycle(), emit)
    assert responder.prompts == []
