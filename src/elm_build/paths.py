from __future__ import annotations

import os
from pathlib import Path

ARTIFACT_NAME = "elm-pacman.js"
PASSTHROUGH_TRANSFORMER = "elm_build.transformer:passthrough"


def default_input_path() -> Path:
    """
    Generated script produced by the Elm compile step.
    Kept relative to the working directory, like the build it runs in.
    """
    raw = os.environ.get("ELM_BUILD_INPUT")
    if raw:
        return Path(raw)
    return Path("tmp") / ARTIFACT_NAME


def default_output_path() -> Path:
    raw = os.environ.get("ELM_BUILD_OUTPUT")
    if raw:
        return Path(raw)
    return Path("docs") / ARTIFACT_NAME


def default_transformer_ref() -> str:
    return os.environ.get("ELM_BUILD_TRANSFORMER") or PASSTHROUGH_TRANSFORMER
