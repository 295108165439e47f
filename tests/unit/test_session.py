from __future__ import annotations

from micstt.audio import read_wav_header
from micstt.state import SessionPhase
from micstt.session import RecordingSession


def test_session_full_cycle() -> None:
    session = RecordingSession()
    assert session.phase is SessionPhase.IDLE

    session.begin()
    assert session.is_recording
    assert session.append(b"\x01\x02")
    assert session.append(b"\x03\x04")
    assert session.recorded_bytes == 4

    cycle = session.end()
    assert cycle is not None
    assert cycle.cycle_id == 1
    assert cycle.pcm_bytes == 4
    assert cycle.wav[44:] == b"\x01\x02\x03\x04"
    assert read_wav_header(cycle.wav).data_size == 4
    assert session.phase is SessionPhase.IDLE
    assert session.recorded_bytes == 0
    assert session.violations == 0


def test_session_empty_recording_yields_header_only() -> None:
    session = RecordingSession()
    session.begin()
    cycle = session.end()
    assert cycle is not None
    assert len(cycle.wav) == 44
    assert read_wav_header(cycle.wav).chunk_size == 36


def test_session_data_while_idle_is_ignored() -> None:
    session = RecordingSession()
    assert session.append(b"\xff\xff") is False
    assert session.phase is SessionPhase.IDLE
    assert session.violations == 1

    session.begin()
    session.append(b"\x01\x00")
    cycle = session.end()
    assert cycle is not None
    assert cycle.pcm_bytes == 2


def test_session_end_while_idle_is_ignored() -> None:
    session = RecordingSession()
    assert session.end() is None
    assert session.phase is SessionPhase.IDLE
    assert session.violations == 1


def test_session_start_while_recording_resets_buffer() -> None:
    session = RecordingSession()
    session.begin()
    session.append(b"\xaa" * 10)
    session.begin()
    assert session.is_recording
    assert session.recorded_bytes == 0

    session.append(b"\xbb\xbb")
    cycle = session.end()
    assert cycle is not None
    assert cycle.cycle_id == 2
    assert cycle.wav[44:] == b"\xbb\xbb"


def test_session_cycles_are_independent() -> None:
    session = RecordingSession()
    session.begin()
    session.append(b"\x01\x01")
    first = session.end()

    session.begin()
    session.append(b"\x02\x02\x02\x02")
    second = session.end()

    assert first is not None and second is not None
    assert first.wav[44:] == b"\x01\x01"
    assert second.wav[44:] == b"\x02\x02\x02\x02"
    assert (first.cycle_id, second.cycle_id) == (1, 2)


def test_session_reset_drops_recording() -> None:
    session = RecordingSession()
    session.begin()
    session.append(b"\x01\x02")
    session.reset()
    assert session.phase is SessionPhase.IDLE
    assert session.end() is None


def test_session_two_frames_produce_expected_file() -> None:
    session = RecordingSession()
    session.begin()
    session.append(b"\x10\x00" * 1600)
    session.append(b"\x20\x00" * 800)
    cycle = session.end()

    assert cycle is not None
    assert len(cycle.wav) == 44 + 4800
    assert cycle.wav[40:44] == (4800).to_bytes(4, "little")
    assert cycle.wav[4:8] == (4836).to_bytes(4, "little")
    assert cycle.wav[44:] == b"\x10\x00" * 1600 + b"\x20\x00" * 800
