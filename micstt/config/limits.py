"""Admission control and per-session limits (env names and defaults)."""

from __future__ import annotations

ENV_MAX_CONCURRENT_CONNECTIONS = "MAX_CONCURRENT_CONNECTIONS"
ENV_MAX_RECORDING_SECONDS = "MAX_RECORDING_SECONDS"
ENV_PIPELINE_QUEUE_MAX = "PIPELINE_QUEUE_MAX"

DEFAULT_MAX_CONCURRENT_CONNECTIONS = 100

# Upper bound on a single recording's audio duration. Protects server memory
# when a client keeps streaming without ever sending "end". 0 disables.
DEFAULT_MAX_RECORDING_SECONDS = 600.0

# Finished recordings waiting for inference on one connection.
DEFAULT_PIPELINE_QUEUE_MAX = 4

__all__ = [
    "DEFAULT_MAX_CONCURRENT_CONNECTIONS",
    "DEFAULT_MAX_RECORDING_SECONDS",
    "DEFAULT_PIPELINE_QUEUE_MAX",
    "ENV_MAX_CONCURRENT_CONNECTIONS",
    "ENV_MAX_RECORDING_SECONDS",
    "ENV_PIPELINE_QUEUE_MAX",
]
