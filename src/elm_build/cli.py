from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import typer

from .models import BuildConfig
from .pipeline.run import run_pipeline

app = typer.Typer(add_completion=False, help="Transform the generated Elm script and publish it to docs/")


@app.command()
def build(
    name: Optional[str] = typer.Argument(None, help="Name passed to the metadata transform"),
    version: Optional[str] = typer.Argument(None, help="Version passed to the metadata transform"),
    additional_info: Optional[str] = typer.Argument(None, help="Free-form extra info for the metadata transform"),
    input_path: Optional[Path] = typer.Option(
        None, "--input", "-i", help="Generated script to read (default: tmp/elm-pacman.js or $ELM_BUILD_INPUT)"
    ),
    extra_input: list[Path] = typer.Option([], "--extra-input", help="Additional script to append (repeatable)"),
    output_path: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Destination file (default: docs/elm-pacman.js or $ELM_BUILD_OUTPUT)"
    ),
    transformer: Optional[str] = typer.Option(
        None, "--transformer", "-t", help="Collaborator module, e.g. mypkg.transformer or mypkg.mod:obj"
    ),
    separator: str = typer.Option(";", "--separator", help="Joins transformed sources"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each build step"),
):
    """
    Read the generated script, run both transforms and write the result.

    Missing positional arguments are passed to the transform as None.
    """
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING)

    overrides: dict[str, Any] = {
        "input_path": input_path,
        "output_path": output_path,
        "transformer": transformer,
    }
    config = BuildConfig(
        name=name,
        version=version,
        additional_info=additional_info,
        extra_input_paths=list(extra_input),
        separator=separator,
        **{k: v for k, v in overrides.items() if v is not None},
    )

    result = run_pipeline(config)
    if not result.ok:
        typer.echo(f"ERROR: {result.stage}: {result.error}", err=True)
        raise typer.Exit(code=2 if result.missing_input else 1)

    typer.echo(f"Wrote {result.output_path} ({result.bytes_written} bytes, sha256 {result.sha256[:12]})")
