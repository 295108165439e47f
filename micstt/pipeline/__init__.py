from .worker import PipelineWorker
from .orchestrator import EmitFn, PipelineOrchestrator

__all__ = ["EmitFn", "PipelineOrchestrator", "PipelineWorker"]
