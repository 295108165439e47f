from __future__ import annotations

from micstt.handlers.websocket.parser import parse_client_frame


def test_parse_binary_frame() -> None:
    frame = parse_client_frame({"type": "websocket.receive", "bytes": b"\x01\x02"})
    assert frame.kind == "data"
    assert frame.data == b"\x01\x02"


def test_parse_empty_binary_frame_is_data() -> None:
    assert parse_client_frame({"type": "websocket.receive", "bytes": b""}).kind == "data"


def test_parse_control_frames() -> None:
    assert parse_client_frame({"type": "websocket.receive", "text": "start"}).kind == "start"
    assert parse_client_frame({"type": "websocket.receive", "text": "end"}).kind == "end"


def test_parse_control_frames_are_exact_match() -> None:
    for text in ("Start", " start", "end\n", "stop", ""):
        frame = parse_client_frame({"type": "websocket.receive", "text": text})
        assert frame.kind == "unknown"
        assert frame.text == text


def test_parse_disconnect() -> None:
    frame = parse_client_frame({"type": "websocket.disconnect", "code": 1001})
    assert frame.kind == "disconnect"
    assert frame.close_code == 1001
