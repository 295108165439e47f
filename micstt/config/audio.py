"""Audio format constants for captured microphone PCM."""

from __future__ import annotations

# Clients resample to PCM16 mono at 16kHz before streaming.
AUDIO_SAMPLE_RATE_HZ: int = 16000
AUDIO_BYTES_PER_SAMPLE: int = 2
AUDIO_CHANNELS: int = 1

AUDIO_BYTES_PER_SECOND: int = AUDIO_SAMPLE_RATE_HZ * AUDIO_BYTES_PER_SAMPLE * AUDIO_CHANNELS

# RIFF/WAVE container layout
WAV_HEADER_SIZE: int = 44
WAV_FMT_CHUNK_SIZE: int = 16
WAV_FORMAT_PCM: int = 1

__all__ = [
    "AUDIO_BYTES_PER_SAMPLE",
    "AUDIO_BYTES_PER_SECOND",
    "AUDIO_CHANNELS",
    "AUDIO_SAMPLE_RATE_HZ",
    "WAV_FMT_CHUNK_SIZE",
    "WAV_FORMAT_PCM",
    "WAV_HEADER_SIZE",
]
