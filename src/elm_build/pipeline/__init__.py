"""Build pipeline: read, transform, join, transform with metadata, write."""

from .run import RunResult, StepOutcome, run_pipeline

__all__ = ["RunResult", "StepOutcome", "run_pipeline"]
