"""Configuration module exports (constants only)."""

from .websocket import WS_ENDPOINT_PATH
from .audio import (
    AUDIO_CHANNELS,
    WAV_HEADER_SIZE,
    AUDIO_SAMPLE_RATE_HZ,
    AUDIO_BYTES_PER_SAMPLE,
)

__all__ = [
    "AUDIO_BYTES_PER_SAMPLE",
    "AUDIO_CHANNELS",
    "AUDIO_SAMPLE_RATE_HZ",
    "WAV_HEADER_SIZE",
    "WS_ENDPOINT_PATH",
]
