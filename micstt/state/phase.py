"""Recording session phases."""

from __future__ import annotations

from enum import Enum


class SessionPhase(str, Enum):
    IDLE = "idle"
    RECORDING = "recording"


__all__ = ["SessionPhase"]
