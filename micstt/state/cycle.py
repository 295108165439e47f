"""Immutable hand-off objects between the session and the pipeline (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RecordingCycle:
    """One finished recording: the encoded WAVE file plus its PCM byte count."""

    cycle_id: int
    wav: bytes
    pcm_bytes: int


@dataclass(frozen=True, slots=True)
class PipelineResult:
    transcript: str
    completion: str


__all__ = ["PipelineResult", "RecordingCycle"]
