"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AuthSettings:
    api_key: str


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    max_concurrent_connections: int
    max_recording_seconds: float
    pipeline_queue_max: int


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    idle_timeout_s: float
    watchdog_tick_s: float


@dataclass(frozen=True, slots=True)
class InferenceSettings:
    account_id: str
    api_token: str
    base_url: str
    stt_model: str
    llm_model: str
    timeout_s: float


@dataclass(frozen=True, slots=True)
class AppSettings:
    auth: AuthSettings
    limits: LimitsSettings
    websocket: WebSocketSettings
    inference: InferenceSettings


__all__ = [
    "AppSettings",
    "AuthSettings",
    "InferenceSettings",
    "LimitsSettings",
    "WebSocketSettings",
]
