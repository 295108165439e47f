"""WebSocket protocol configuration and constants."""

from __future__ import annotations

WS_ENDPOINT_PATH = "/ws"

# Client -> server control frames (text)
WS_MSG_START = "start"
WS_MSG_END = "end"

# Server -> client JSON keys and ctx discriminators
WS_KEY_CTX = "ctx"
WS_KEY_TEXT = "text"
WS_CTX_REQUEST = "request"
WS_CTX_RESPONSE = "response"

# Close codes
WS_CLOSE_TOO_LARGE_CODE = 1009
WS_CLOSE_INTERNAL_CODE = 1011
WS_CLOSE_BUSY_CODE = 1013
WS_CLOSE_IDLE_CODE = 4000
WS_CLOSE_UNAUTHORIZED_CODE = 4001

WS_CLOSE_TOO_LARGE_REASON = "recording too long"
WS_CLOSE_INFERENCE_REASON = "inference failed"
WS_CLOSE_INTERNAL_REASON = "internal error"
WS_CLOSE_BUSY_REASON = "too many pending recordings"
WS_CLOSE_CAPACITY_REASON = "server at capacity"
WS_CLOSE_IDLE_REASON = "idle timeout"
WS_CLOSE_UNAUTHORIZED_REASON = "authentication failed"

# Idle watchdog
ENV_WS_IDLE_TIMEOUT_S = "WS_IDLE_TIMEOUT_S"
ENV_WS_WATCHDOG_TICK_S = "WS_WATCHDOG_TICK_S"
DEFAULT_WS_IDLE_TIMEOUT_S = 300.0
DEFAULT_WS_WATCHDOG_TICK_S = 5.0

__all__ = [
    "DEFAULT_WS_IDLE_TIMEOUT_S",
    "DEFAULT_WS_WATCHDOG_TICK_S",
    "ENV_WS_IDLE_TIMEOUT_S",
    "ENV_WS_WATCHDOG_TICK_S",
    "WS_CLOSE_BUSY_CODE",
    "WS_CLOSE_BUSY_REASON",
    "WS_CLOSE_CAPACITY_REASON",
    "WS_CLOSE_IDLE_CODE",
    "WS_CLOSE_IDLE_REASON",
    "WS_CLOSE_INFERENCE_REASON",
    "WS_CLOSE_INTERNAL_CODE",
    "WS_CLOSE_INTERNAL_REASON",
    "WS_CLOSE_TOO_LARGE_CODE",
    "WS_CLOSE_TOO_LARGE_REASON",
    "WS_CLOSE_UNAUTHORIZED_CODE",
    "WS_CLOSE_UNAUTHORIZED_REASON",
    "WS_CTX_REQUEST",
    "WS_CTX_RESPONSE",
    "WS_ENDPOINT_PATH",
    "WS_KEY_CTX",
    "WS_KEY_TEXT",
    "WS_MSG_END",
    "WS_MSG_START",
]
