"""Secrets and authentication configuration."""

from __future__ import annotations

ENV_MICSTT_API_KEY = "MICSTT_API_KEY"
ENV_CLOUDFLARE_ACCOUNT_ID = "CLOUDFLARE_ACCOUNT_ID"
ENV_CLOUDFLARE_API_TOKEN = "CLOUDFLARE_API_TOKEN"

__all__ = ["ENV_CLOUDFLARE_ACCOUNT_ID", "ENV_CLOUDFLARE_API_TOKEN", "ENV_MICSTT_API_KEY"]
