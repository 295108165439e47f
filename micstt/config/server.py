"""HTTP server bind configuration."""

from __future__ import annotations

ENV_HOST = "HOST"
ENV_PORT = "PORT"
DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 8000

__all__ = ["DEFAULT_HOST", "DEFAULT_PORT", "ENV_HOST", "ENV_PORT"]
