"""Logging configuration (env-resolved constants only)."""

from __future__ import annotations

import os

LOG_LEVEL: str = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# httpx logs every request at INFO. Keep it quiet unless explicitly enabled.
ENV_SHOW_HTTPX_LOGS = "SHOW_HTTPX_LOGS"
NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")

__all__ = ["ENV_SHOW_HTTPX_LOGS", "LOG_FORMAT", "LOG_LEVEL", "NOISY_LOGGERS"]
