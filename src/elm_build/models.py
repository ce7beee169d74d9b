from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .paths import default_input_path, default_output_path, default_transformer_ref


class BuildConfig(BaseModel):
    """
    Everything a single build needs, passed explicitly to the runner.

    input_path: primary generated script to read
    extra_input_paths: further scripts, concatenated after the primary one
    output_path: destination file (its directory must already exist)
    name / version / additional_info: metadata handed to the metadata-aware
        transform. Absent values stay None; they are never defaulted to "".
    separator: joins the transformed sources
    transformer: collaborator module reference (see transformer.load_transformer)
    """
    input_path: Path = Field(default_factory=default_input_path)
    extra_input_paths: list[Path] = Field(default_factory=list)
    output_path: Path = Field(default_factory=default_output_path)
    name: Optional[str] = None
    version: Optional[str] = None
    additional_info: Optional[str] = None
    separator: str = ";"
    transformer: str = Field(default_factory=default_transformer_ref)
    encoding: str = "utf-8"

    def source_paths(self) -> list[Path]:
        return [self.input_path, *self.extra_input_paths]


class TransformParams(BaseModel):
    """
    Input record for the metadata-aware transform.
    """
    code: str
    name: Optional[str] = None
    version: Optional[str] = None
    additional_info: Optional[str] = None

    def as_payload(self) -> dict[str, Any]:
        """Plain dict in the shape collaborators expect (`additionalInfo` key)."""
        return {
            "code": self.code,
            "name": self.name,
            "version": self.version,
            "additionalInfo": self.additional_info,
        }


class TransformResult(BaseModel):
    """
    Result record of the metadata-aware transform. Only `code` is used;
    any other keys the collaborator returns are kept but ignored.
    """
    model_config = ConfigDict(extra="allow")

    code: str
