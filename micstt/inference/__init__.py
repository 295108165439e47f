from .workers_ai import WorkersAIClient

__all__ = ["WorkersAIClient"]
