"""Shared error types for the micstt server."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InferenceError(Exception):
    """Raised when a transcription or completion call fails or returns malformed data."""

    stage: str
    message: str
    status_code: int | None = None

    def __str__(self) -> str:
        if self.status_code is None:
            return f"{self.stage}: {self.message}"
        return f"{self.stage}: {self.message} (status={self.status_code})"


@dataclass(frozen=True, slots=True)
class PipelineBusyError(Exception):
    """Raised when a session already has too many recordings waiting for inference."""

    pending: int
    limit: int


class TransportClosedError(Exception):
    """Raised when the client transport went away while a pipeline run was emitting results."""


__all__ = ["InferenceError", "PipelineBusyError", "TransportClosedError"]
