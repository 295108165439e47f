"""RIFF/WAVE PCM container encoding.

The header is the canonical 44-byte layout: a RIFF chunk wrapping a 16-byte
``fmt `` chunk and a ``data`` chunk. All multi-byte fields are little-endian.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

from micstt.config.audio import (
    AUDIO_CHANNELS,
    WAV_FORMAT_PCM,
    WAV_HEADER_SIZE,
    WAV_FMT_CHUNK_SIZE,
    AUDIO_SAMPLE_RATE_HZ,
    AUDIO_BYTES_PER_SAMPLE,
)

# ChunkID, ChunkSize, Format, Subchunk1ID, Subchunk1Size, AudioFormat, NumChannels,
# SampleRate, ByteRate, BlockAlign, BitsPerSample, Subchunk2ID, Subchunk2Size
_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")

# Everything in the RIFF chunk after ChunkSize, minus the audio data.
_RIFF_OVERHEAD = WAV_HEADER_SIZE - 8


@dataclass(frozen=True, slots=True)
class WaveHeader:
    chunk_size: int
    audio_format: int
    channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    data_size: int


def encode_wav(
    pcm: bytes,
    length: int,
    *,
    sample_rate: int = AUDIO_SAMPLE_RATE_HZ,
    bytes_per_sample: int = AUDIO_BYTES_PER_SAMPLE,
    channels: int = AUDIO_CHANNELS,
) -> bytes:
    """Return a complete WAVE file: the 44-byte header followed by ``pcm`` verbatim.

    ``length`` must equal ``len(pcm)``; the header length fields are derived from it.
    An empty ``pcm`` still yields a well-formed file with a zero-length data chunk.
    """
    if length != len(pcm):
        raise ValueError(f"length mismatch: length={length} len(pcm)={len(pcm)}")

    header = _HEADER.pack(
        b"RIFF",
        _RIFF_OVERHEAD + length,
        b"WAVE",
        b"fmt ",
        WAV_FMT_CHUNK_SIZE,
        WAV_FORMAT_PCM,
        channels,
        sample_rate,
        sample_rate * bytes_per_sample * channels,
        bytes_per_sample * channels,
        8 * bytes_per_sample,
        b"data",
        length,
    )
    return header + pcm


def read_wav_header(data: bytes) -> WaveHeader:
    if len(data) < WAV_HEADER_SIZE:
        raise ValueError(f"expected at least {WAV_HEADER_SIZE} bytes, got {len(data)}")

    (
        riff,
        chunk_size,
        wave,
        fmt,
        fmt_size,
        audio_format,
        channels,
        sample_rate,
        byte_rate,
        block_align,
        bits_per_sample,
        data_id,
        data_size,
    ) = _HEADER.unpack_from(data)

    if riff != b"RIFF" or wave != b"WAVE" or fmt != b"fmt " or data_id != b"data":
        raise ValueError("not a canonical RIFF/WAVE PCM header")
    if fmt_size != WAV_FMT_CHUNK_SIZE:
        raise ValueError(f"unexpected fmt chunk size {fmt_size}")

    return WaveHeader(
        chunk_size=chunk_size,
        audio_format=audio_format,
        channels=channels,
        sample_rate=sample_rate,
        byte_rate=byte_rate,
        block_align=block_align,
        bits_per_sample=bits_per_sample,
        data_size=data_size,
    )


__all__ = ["WaveHeader", "encode_wav", "read_wav_header"]
