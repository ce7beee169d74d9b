"""Two-step build glue for the generated Elm script."""

from .models import BuildConfig, TransformParams, TransformResult
from .pipeline import RunResult, run_pipeline
from .transformer import Transformer, TransformerLoadError, load_transformer

__all__ = [
    "BuildConfig",
    "RunResult",
    "TransformParams",
    "TransformResult",
    "Transformer",
    "TransformerLoadError",
    "load_transformer",
    "run_pipeline",
]
