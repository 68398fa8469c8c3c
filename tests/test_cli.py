from __future__ import annotations

import json
import typing as typ

import pytest

from docs_md import cli
from docs_md.config import GeneratorConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write_export(tmp_path: Path, *, broken: bool = False) -> Path:
    children = [
        {
            "route": "/DOCS-BASE/tutorial/",
            "title": "Tutorial",
            "body": {"kind": "html", "content": "<p>Learn</p>"},
        }
    ]
    if broken:
        children.append(
            {
                "route": "/DOCS-BASE/broken",
                "title": "Broken",
                "body": {"kind": "func", "content": "<p>not an object</p>"},
            }
        )
    payload = {
        "route": "/DOCS-BASE/",
        "title": "Overview",
        "body": {"kind": "html", "content": "<h1>Overview</h1><p>Welcome</p>"},
        "children": children,
    }
    path = tmp_path / "docs.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_generate_writes_pages(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    export = _write_export(tmp_path)

    cli.generate(input_file=export, output_dir=tmp_path / "out")

    assert capsys.readouterr().out.strip() == "wrote 2 page(s) to out"
    index = (tmp_path / "out" / "index.md").read_text(encoding="utf-8")
    assert index == "---\ntitle: Overview\n---\n\nWelcome\n"
    assert (tmp_path / "out" / "tutorial.md").is_file()


def test_generate_reports_failed_routes(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    export = _write_export(tmp_path, broken=True)

    with pytest.raises(SystemExit) as excinfo:
        cli.generate(input_file=export, output_dir=tmp_path / "out")

    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert "wrote 2 page(s) to out" in out
    assert "failed /DOCS-BASE/broken:" in out
    assert (tmp_path / "out" / "tutorial.md").is_file()


def test_generate_uses_config_file(tmp_path: Path) -> None:
    _write_export(tmp_path)
    config = tmp_path / "docs-md.yaml"
    config.write_text(
        "input: docs.json\noutput_dir: md\nfrontmatter: false\n", encoding="utf-8"
    )

    cli.generate(config=config)

    assert (tmp_path / "md" / "index.md").read_text(encoding="utf-8") == "Welcome\n"


def test_cli_flags_override_config(tmp_path: Path) -> None:
    _write_export(tmp_path)
    config = tmp_path / "docs-md.yaml"
    config.write_text("input: docs.json\nfrontmatter: false\n", encoding="utf-8")

    cli.generate(config=config, output_dir=tmp_path / "other", frontmatter=True)

    index = (tmp_path / "other" / "index.md").read_text(encoding="utf-8")
    assert index.startswith("---\ntitle: Overview\n")


def test_missing_export_is_reported(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        cli.generate(input_file=tmp_path / "absent.json")


def test_input_is_required() -> None:
    with pytest.raises(GeneratorConfigError):
        cli.generate()


def test_format_path_prefers_cwd_relative(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    assert cli._format_path(tmp_path / "out" / "site") == "out/site"
