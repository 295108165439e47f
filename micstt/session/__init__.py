from .machine import RecordingSession

__all__ = ["RecordingSession"]
