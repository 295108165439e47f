"""Append-only PCM buffer for one recording cycle."""

from __future__ import annotations


class AudioAccumulator:
    """Concatenate inbound PCM frames in arrival order.

    Frames are not validated: odd lengths or misaligned samples are kept as-is.
    The buffer is a single growing ``bytearray`` so appends stay amortized O(1)
    and the length is tracked rather than recomputed.
    """

    def __init__(self) -> None:
        self._buf = bytearray()
        self._length = 0

    @property
    def length(self) -> int:
        return self._length

    def append(self, frame: bytes) -> None:
        self._buf += frame
        self._length += len(frame)

    def snapshot(self) -> tuple[bytes, int]:
        return bytes(self._buf), self._length


__all__ = ["AudioAccumulator"]
