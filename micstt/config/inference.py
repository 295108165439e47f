"""Workers AI inference configuration (env names and defaults)."""

from __future__ import annotations

ENV_WORKERS_AI_BASE_URL = "WORKERS_AI_BASE_URL"
ENV_STT_MODEL = "STT_MODEL"
ENV_LLM_MODEL = "LLM_MODEL"
ENV_INFERENCE_TIMEOUT_S = "INFERENCE_TIMEOUT_S"

DEFAULT_WORKERS_AI_BASE_URL = "https://api.cloudflare.com/client/v4"
DEFAULT_STT_MODEL = "@cf/openai/whisper"
DEFAULT_LLM_MODEL = "@cf/mistral/mistral-7b-instruct-v0.1"
DEFAULT_INFERENCE_TIMEOUT_S = 60.0

# Completion requests carry the transcript as the only conversational turn.
LLM_USER_ROLE = "user"

__all__ = [
    "DEFAULT_INFERENCE_TIMEOUT_S",
    "DEFAULT_LLM_MODEL",
    "DEFAULT_STT_MODEL",
    "DEFAULT_WORKERS_AI_BASE_URL",
    "ENV_INFERENCE_TIMEOUT_S",
    "ENV_LLM_MODEL",
    "ENV_STT_MODEL",
    "ENV_WORKERS_AI_BASE_URL",
    "LLM_USER_ROLE",
]
