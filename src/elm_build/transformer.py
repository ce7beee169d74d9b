"""Collaborator transforms.

The build never looks inside the transforms it runs. It only needs an object
exposing two callables:

    transform_elm_code(code: str) -> str
    transform_code(params: dict) -> {"code": str, ...}

`params` carries the keys `code`, `name`, `version` and `additionalInfo`.
Collaborators are referenced as `package.module` or `package.module:attr`.
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)

CODE_TRANSFORM = "transform_elm_code"
METADATA_TRANSFORM = "transform_code"


class TransformerLoadError(ValueError):
    """Raised when a collaborator reference cannot be resolved."""


@dataclass(frozen=True)
class Transformer:
    """The two transform capabilities the build depends on."""

    transform_elm_code: Callable[[str], Any]
    transform_code: Callable[[Mapping[str, Any]], Any]
    ref: str = "<inline>"


def _identity(code: str) -> str:
    return code


def _code_only(params: Mapping[str, Any]) -> dict[str, Any]:
    return {"code": params["code"]}


passthrough = Transformer(transform_elm_code=_identity, transform_code=_code_only, ref="passthrough")


def load_transformer(ref: str) -> Transformer:
    """
    Resolve `ref` into a Transformer.

    - "pkg.mod"       -> module-level transform_elm_code / transform_code
    - "pkg.mod:attr"  -> the named attribute; either a Transformer already or
                         any object carrying both callables
    """
    ref = ref.strip()
    if not ref:
        raise TransformerLoadError("Empty transformer reference.")

    module_name, _, attr = ref.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise TransformerLoadError(f"Cannot import transformer module '{module_name}': {e}") from e

    target: Any = module
    if attr:
        try:
            target = getattr(module, attr)
        except AttributeError as e:
            raise TransformerLoadError(f"Module '{module_name}' has no attribute '{attr}'.") from e

    if isinstance(target, Transformer):
        logger.debug("Using transformer %s", ref)
        return target

    missing = [n for n in (CODE_TRANSFORM, METADATA_TRANSFORM) if not callable(getattr(target, n, None))]
    if missing:
        raise TransformerLoadError(f"Transformer '{ref}' is missing callable(s): {', '.join(missing)}")

    logger.debug("Loaded transformer %s", ref)
    return Transformer(
        transform_elm_code=getattr(target, CODE_TRANSFORM),
        transform_code=getattr(target, METADATA_TRANSFORM),
        ref=ref,
    )
