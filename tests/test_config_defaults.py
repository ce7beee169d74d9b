from __future__ import annotations

from pathlib import Path

from elm_build.models import BuildConfig, TransformParams, TransformResult
from elm_build.paths import PASSTHROUGH_TRANSFORMER


def test_defaults_point_at_tmp_and_docs(monkeypatch) -> None:
    for var in ("ELM_BUILD_INPUT", "ELM_BUILD_OUTPUT", "ELM_BUILD_TRANSFORMER"):
        monkeypatch.delenv(var, raising=False)

    cfg = BuildConfig()

    assert cfg.input_path == Path("tmp") / "elm-pacman.js"
    assert cfg.output_path == Path("docs") / "elm-pacman.js"
    assert cfg.transformer == PASSTHROUGH_TRANSFORMER
    assert cfg.separator == ";"
    assert cfg.name is None and cfg.version is None and cfg.additional_info is None


def test_environment_overrides_defaults(monkeypatch) -> None:
    monkeypatch.setenv("ELM_BUILD_INPUT", "build/main.js")
    monkeypatch.setenv("ELM_BUILD_OUTPUT", "site/main.js")
    monkeypatch.setenv("ELM_BUILD_TRANSFORMER", "mypkg.transformer")

    cfg = BuildConfig()

    assert cfg.input_path == Path("build/main.js")
    assert cfg.output_path == Path("site/main.js")
    assert cfg.transformer == "mypkg.transformer"


def test_source_paths_keep_primary_first() -> None:
    cfg = BuildConfig(input_path=Path("a.js"), extra_input_paths=[Path("b.js"), Path("c.js")])
    assert cfg.source_paths() == [Path("a.js"), Path("b.js"), Path("c.js")]


def test_transform_payload_uses_collaborator_keys() -> None:
    payload = TransformParams(code="x", name="n").as_payload()
    assert payload == {"code": "x", "name": "n", "version": None, "additionalInfo": None}


def test_transform_result_keeps_extra_keys() -> None:
    res = TransformResult.model_validate({"code": "x", "map": "y"})
    assert res.code == "x"
    assert res.model_extra == {"map": "y"}
