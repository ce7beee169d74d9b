from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from ..models import BuildConfig, TransformParams, TransformResult
from ..transformer import Transformer, TransformerLoadError, load_transformer
from ..utils import read_text, sha256_file, write_text

logger = logging.getLogger(__name__)

STAGE_LOAD = "load"
STAGE_READ = "read"
STAGE_TRANSFORM_CODE = "transform_code"
STAGE_TRANSFORM_METADATA = "transform_metadata"
STAGE_WRITE = "write"


@dataclass(frozen=True)
class StepOutcome:
    """Result of a single build step. `value` is only meaningful when ok."""

    ok: bool
    stage: str
    value: Any = None
    error: Optional[str] = None
    missing_input: bool = False

    @classmethod
    def success(cls, stage: str, value: Any) -> "StepOutcome":
        return cls(ok=True, stage=stage, value=value)

    @classmethod
    def failure(cls, stage: str, error: str, *, missing_input: bool = False) -> "StepOutcome":
        return cls(ok=False, stage=stage, error=error, missing_input=missing_input)


@dataclass(frozen=True)
class RunResult:
    """Return type for build runs.

    On failure `stage` names the step that stopped the run and nothing has
    been written to `output_path`.
    """

    ok: bool
    output_path: Path
    stage: Optional[str] = None
    error: Optional[str] = None
    missing_input: bool = False
    sources: int = 0
    bytes_written: int = 0
    sha256: Optional[str] = None

    @classmethod
    def from_failure(cls, outcome: StepOutcome, output_path: Path) -> "RunResult":
        return cls(
            ok=False,
            output_path=output_path,
            stage=outcome.stage,
            error=outcome.error,
            missing_input=outcome.missing_input,
        )


def read_source(path: Path, encoding: str = "utf-8") -> StepOutcome:
    try:
        text = read_text(path, encoding)
    except FileNotFoundError:
        return StepOutcome.failure(STAGE_READ, f"Input file not found: {path}", missing_input=True)
    except (OSError, UnicodeDecodeError) as e:
        return StepOutcome.failure(STAGE_READ, f"Cannot read {path}: {e}")
    logger.debug("Read %d chars from %s", len(text), path)
    return StepOutcome.success(STAGE_READ, text)


def apply_code_transform(transformer: Transformer, code: str) -> StepOutcome:
    """Run the context-free transform: text in, text out."""
    try:
        out = transformer.transform_elm_code(code)
    except Exception as e:
        return StepOutcome.failure(STAGE_TRANSFORM_CODE, f"{type(e).__name__}: {e}")
    if not isinstance(out, str):
        return StepOutcome.failure(
            STAGE_TRANSFORM_CODE, f"Expected text from {transformer.ref}, got {type(out).__name__}"
        )
    return StepOutcome.success(STAGE_TRANSFORM_CODE, out)


def join_sources(texts: list[str], separator: str = ";") -> str:
    # A single source comes back untouched.
    return separator.join(texts)


def _coerce_result(raw: Any) -> TransformResult:
    if isinstance(raw, TransformResult):
        return raw
    if isinstance(raw, Mapping):
        return TransformResult.model_validate(dict(raw))
    if hasattr(raw, "code"):
        return TransformResult(code=getattr(raw, "code"))
    raise TypeError(f"result has no 'code' field (got {type(raw).__name__})")


def apply_metadata_transform(transformer: Transformer, params: TransformParams) -> StepOutcome:
    """Run the metadata-aware transform and extract its `code` field."""
    try:
        raw = transformer.transform_code(params.as_payload())
    except Exception as e:
        return StepOutcome.failure(STAGE_TRANSFORM_METADATA, f"{type(e).__name__}: {e}")
    try:
        result = _coerce_result(raw)
    except (TypeError, ValidationError) as e:
        return StepOutcome.failure(STAGE_TRANSFORM_METADATA, f"Invalid result from {transformer.ref}: {e}")
    return StepOutcome.success(STAGE_TRANSFORM_METADATA, result)


def write_output(path: Path, code: str, encoding: str = "utf-8") -> StepOutcome:
    if not path.parent.is_dir():
        return StepOutcome.failure(STAGE_WRITE, f"Output directory does not exist: {path.parent}")
    try:
        n = write_text(path, code, encoding)
    except (OSError, UnicodeEncodeError) as e:
        return StepOutcome.failure(STAGE_WRITE, f"Cannot write {path}: {e}")
    logger.info("Wrote %d bytes to %s", n, path)
    return StepOutcome.success(STAGE_WRITE, n)


def _stop(outcome: StepOutcome, output_path: Path) -> RunResult:
    logger.warning("Build step '%s' failed: %s", outcome.stage, outcome.error)
    return RunResult.from_failure(outcome, output_path)


def run_pipeline(config: BuildConfig, transformer: Transformer | None = None) -> RunResult:
    """Build entrypoint.

    read -> transform each source -> join -> metadata transform -> write.
    Stops at the first failed step; the output file is only touched once
    every earlier step has succeeded. When `transformer` is None it is
    resolved from `config.transformer`.
    """

    if transformer is None:
        try:
            transformer = load_transformer(config.transformer)
        except TransformerLoadError as e:
            return _stop(StepOutcome.failure(STAGE_LOAD, str(e)), config.output_path)

    transformed: list[str] = []
    for path in config.source_paths():
        read = read_source(path, config.encoding)
        if not read.ok:
            return _stop(read, config.output_path)
        step = apply_code_transform(transformer, read.value)
        if not step.ok:
            return _stop(step, config.output_path)
        transformed.append(step.value)

    params = TransformParams(
        code=join_sources(transformed, config.separator),
        name=config.name,
        version=config.version,
        additional_info=config.additional_info,
    )
    step = apply_metadata_transform(transformer, params)
    if not step.ok:
        return _stop(step, config.output_path)

    written = write_output(config.output_path, step.value.code, config.encoding)
    if not written.ok:
        return _stop(written, config.output_path)

    return RunResult(
        ok=True,
        output_path=config.output_path,
        sources=len(transformed),
        bytes_written=written.value,
        sha256=sha256_file(config.output_path),
    )
