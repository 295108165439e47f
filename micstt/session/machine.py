"""Per-connection recording state machine.

Transitions (every event is defined in every phase):

    idle      + start -> recording   new accumulator
    recording + data  -> recording   append frame
    recording + end   -> idle        encode WAVE, hand off cycle, drop accumulator
    recording + start -> recording   implicit reset, previous audio discarded
    idle      + data  -> idle        protocol violation, ignored
    idle      + end   -> idle        protocol violation, ignored
"""

from __future__ import annotations

import logging

from micstt.audio import AudioAccumulator, encode_wav
from micstt.state import SessionPhase, RecordingCycle

logger = logging.getLogger(__name__)


class RecordingSession:
    def __init__(self) -> None:
        self.phase = SessionPhase.IDLE
        self.violations = 0
        self._accumulator: AudioAccumulator | None = None
        self._cycle_id = 0

    @property
    def is_recording(self) -> bool:
        return self.phase is SessionPhase.RECORDING

    @property
    def cycle_id(self) -> int:
        return self._cycle_id

    @property
    def recorded_bytes(self) -> int:
        if self._accumulator is None:
            return 0
        return self._accumulator.length

    def begin(self) -> None:
        if self.phase is SessionPhase.RECORDING:
            logger.info(
                "session: start while recording; discarding cycle=%s (%s bytes)",
                self._cycle_id,
                self.recorded_bytes,
            )
        self._cycle_id += 1
        self._accumulator = AudioAccumulator()
        self.phase = SessionPhase.RECORDING

    def append(self, frame: bytes) -> bool:
        """Append a data frame; returns False when the frame was ignored (no active recording)."""
        if self._accumulator is None:
            self.violations += 1
            logger.warning("session: ignoring %s-byte data frame received while idle", len(frame))
            return False
        self._accumulator.append(frame)
        return True

    def end(self) -> RecordingCycle | None:
        """Close the current recording and return the encoded cycle, or None while idle."""
        accumulator = self._accumulator
        if accumulator is None:
            self.violations += 1
            logger.warning("session: ignoring end received while idle")
            return None

        pcm, length = accumulator.snapshot()
        assert length == len(pcm), "accumulator length out of sync with its bytes"
        cycle = RecordingCycle(cycle_id=self._cycle_id, wav=encode_wav(pcm, length), pcm_bytes=length)

        self._accumulator = None
        self.phase = SessionPhase.IDLE
        return cycle

    def reset(self) -> None:
        """Drop any in-progress recording and return to idle."""
        self._accumulator = None
        self.phase = SessionPhase.IDLE


__all__ = ["RecordingSession"]
