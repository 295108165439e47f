"""Environment parsing for runtime settings.

Env names and defaults live in `micstt/config/*`; this module resolves them into
the frozen dataclasses from `micstt/state/settings.py`. Unparseable numbers fall
back to their defaults.
"""

from __future__ import annotations

import os

from micstt.config.secrets import ENV_MICSTT_API_KEY, ENV_CLOUDFLARE_API_TOKEN, ENV_CLOUDFLARE_ACCOUNT_ID
from micstt.state.settings import (
    AppSettings,
    AuthSettings,
    LimitsSettings,
    InferenceSettings,
    WebSocketSettings,
)
from micstt.config.websocket import (
    ENV_WS_IDLE_TIMEOUT_S,
    ENV_WS_WATCHDOG_TICK_S,
    DEFAULT_WS_IDLE_TIMEOUT_S,
    DEFAULT_WS_WATCHDOG_TICK_S,
)
from micstt.config.limits import (
    ENV_PIPELINE_QUEUE_MAX,
    ENV_MAX_RECORDING_SECONDS,
    DEFAULT_PIPELINE_QUEUE_MAX,
    DEFAULT_MAX_RECORDING_SECONDS,
    ENV_MAX_CONCURRENT_CONNECTIONS,
    DEFAULT_MAX_CONCURRENT_CONNECTIONS,
)
from micstt.config.inference import (
    ENV_LLM_MODEL,
    ENV_STT_MODEL,
    DEFAULT_LLM_MODEL,
    DEFAULT_STT_MODEL,
    ENV_INFERENCE_TIMEOUT_S,
    ENV_WORKERS_AI_BASE_URL,
    DEFAULT_INFERENCE_TIMEOUT_S,
    DEFAULT_WORKERS_AI_BASE_URL,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _load_auth_settings() -> AuthSettings:
    return AuthSettings(api_key=_str_env(ENV_MICSTT_API_KEY, ""))


def _load_limits_settings() -> LimitsSettings:
    max_connections = _int_env(ENV_MAX_CONCURRENT_CONNECTIONS, DEFAULT_MAX_CONCURRENT_CONNECTIONS)
    max_recording_s = _float_env(ENV_MAX_RECORDING_SECONDS, DEFAULT_MAX_RECORDING_SECONDS)
    queue_max = _int_env(ENV_PIPELINE_QUEUE_MAX, DEFAULT_PIPELINE_QUEUE_MAX)

    return LimitsSettings(
        max_concurrent_connections=max(1, max_connections),
        max_recording_seconds=max(0.0, max_recording_s),
        pipeline_queue_max=max(0, queue_max),
    )


def _load_websocket_settings() -> WebSocketSettings:
    idle_timeout = _float_env(ENV_WS_IDLE_TIMEOUT_S, DEFAULT_WS_IDLE_TIMEOUT_S)
    watchdog_tick = _float_env(ENV_WS_WATCHDOG_TICK_S, DEFAULT_WS_WATCHDOG_TICK_S)
    if watchdog_tick <= 0:
        watchdog_tick = DEFAULT_WS_WATCHDOG_TICK_S

    return WebSocketSettings(
        idle_timeout_s=max(0.0, idle_timeout),
        watchdog_tick_s=watchdog_tick,
    )


def _load_inference_settings() -> InferenceSettings:
    timeout_s = _float_env(ENV_INFERENCE_TIMEOUT_S, DEFAULT_INFERENCE_TIMEOUT_S)
    if timeout_s <= 0:
        timeout_s = DEFAULT_INFERENCE_TIMEOUT_S

    return InferenceSettings(
        account_id=_str_env(ENV_CLOUDFLARE_ACCOUNT_ID, ""),
        api_token=_str_env(ENV_CLOUDFLARE_API_TOKEN, ""),
        base_url=_str_env(ENV_WORKERS_AI_BASE_URL, DEFAULT_WORKERS_AI_BASE_URL).rstrip("/"),
        stt_model=_str_env(ENV_STT_MODEL, DEFAULT_STT_MODEL),
        llm_model=_str_env(ENV_LLM_MODEL, DEFAULT_LLM_MODEL),
        timeout_s=timeout_s,
    )


def load_settings() -> AppSettings:
    return AppSettings(
        auth=_load_auth_settings(),
        limits=_load_limits_settings(),
        websocket=_load_websocket_settings(),
        inference=_load_inference_settings(),
    )


__all__ = ["load_settings"]
