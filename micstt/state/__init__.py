from .phase import SessionPhase
from .runtime import RuntimeDeps
from .frame import ClientFrame
from .settings import AppSettings
from .cycle import PipelineResult, RecordingCycle

__all__ = [
    "AppSettings",
    "ClientFrame",
    "PipelineResult",
    "RecordingCycle",
    "RuntimeDeps",
    "SessionPhase",
]
