"""Tests for presenter_kit.presentation.cli — developer commands."""

from __future__ import annotations

import json
from pathlib import Path
from types import SimpleNamespace

from typer.testing import CliRunner

from presenter_kit.application import Presenter
from presenter_kit.presentation.cli import app, preview_fields, public_fields


runner = CliRunner()


def _write_subject(tmp_path: Path, data: object) -> Path:
    path = tmp_path / "subject.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# ── escape ──────────────────────────────────────────────────────────


def test_escape_prints_entities() -> None:
    result = runner.invoke(app, ["escape", "<b>it's</b>"])
    assert result.exit_code == 0
    assert result.output.strip() == "&lt;b&gt;it&apos;s&lt;&#x2F;b&gt;"


def test_escape_hex_apostrophe() -> None:
    result = runner.invoke(app, ["escape", "it's", "--apostrophe", "&#x27;"])
    assert result.exit_code == 0
    assert result.output.strip() == "it&#x27;s"


def test_escape_rejects_unknown_apostrophe() -> None:
    result = runner.invoke(app, ["escape", "x", "-a", "&#39;"])
    assert result.exit_code == 1
    assert "apostrophe_entity" in result.output


# ── inspect ─────────────────────────────────────────────────────────


def test_inspect_shows_raw_and_escaped(tmp_path: Path) -> None:
    path = _write_subject(tmp_path, {"title": "<h1>", "count": 3})
    result = runner.invoke(app, ["inspect", str(path)])
    assert result.exit_code == 0
    assert "title" in result.output
    assert "&lt;h1&gt;" in result.output
    assert "count" in result.output


def test_inspect_selected_field(tmp_path: Path) -> None:
    path = _write_subject(tmp_path, {"title": "<h1>", "body": "plain"})
    result = runner.invoke(app, ["inspect", str(path), "--field", "body"])
    assert result.exit_code == 0
    assert "body" in result.output
    assert "title" not in result.output


def test_inspect_skips_private_keys(tmp_path: Path) -> None:
    path = _write_subject(tmp_path, {"_id": 1, "title": "<h1>"})
    result = runner.invoke(app, ["inspect", str(path)])
    assert result.exit_code == 0
    assert "Skipped private fields: _id" in result.output
    assert "&lt;h1&gt;" in result.output


def test_public_fields_keep_file_order() -> None:
    subject = SimpleNamespace(b=1, _rev=2, a=3)
    assert public_fields(subject) == ["b", "a"]


def test_inspect_unknown_field_fails(tmp_path: Path) -> None:
    path = _write_subject(tmp_path, {"title": "x"})
    result = runner.invoke(app, ["inspect", str(path), "-f", "nope"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_inspect_requires_object(tmp_path: Path) -> None:
    path = _write_subject(tmp_path, ["not", "an", "object"])
    result = runner.invoke(app, ["inspect", str(path)])
    assert result.exit_code == 1
    assert "JSON object" in result.output


def test_inspect_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["inspect", str(tmp_path / "absent.json")])
    assert result.exit_code == 1
    assert "Cannot read" in result.output


def test_preview_fields_marks_changes() -> None:
    class Subject:
        title = "<h1>"
        count = 3

    previews = preview_fields(Presenter(Subject()), ["title", "count"])
    title, count = previews
    assert title.raw == "<h1>"
    assert title.escaped == "&lt;h1&gt;"
    assert title.changed
    assert count.escaped == 3
    assert not count.changed


# ── config ──────────────────────────────────────────────────────────


def test_config_lists_settings() -> None:
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 0
    assert "apostrophe_entity" in result.output
    assert "allow_missing_subject" in result.output
