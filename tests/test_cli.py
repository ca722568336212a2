# tests/test_cli.py

from __future__ import annotations

import json

from typer.testing import CliRunner

from selection_trail.cli import app
from selection_trail.utils import mock_file_path

runner = CliRunner()


def _trail_json(*args: str) -> dict:
    result = runner.invoke(app, ["trail", *args, "--json"])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


def test_trail_collapsed_selection() -> None:
    data = _trail_json(str(mock_file_path("selection.json")), "--anchor", "0/0", "--anchor-offset", "2")
    assert data["anchor"] == ["div", "p[1/2]", "text[2/5]"]
    assert data["focus"] == data["anchor"]


def test_trail_anchor_and_focus() -> None:
    data = _trail_json(
        str(mock_file_path("selection.json")),
        "--anchor", "0/0",
        "--anchor-offset", "1",
        "--focus", "0/1/0",
        "--focus-offset", "3",
    )
    assert data["anchor"] == ["div", "p[1/2]", "text[1/5]"]
    assert data["focus"] == ["div", "p[2/2]", "span", "#text[3/5]"]


def test_trail_without_anchor_reports_no_selection() -> None:
    data = _trail_json(str(mock_file_path("selection.json")))
    assert data == {"anchor": ["<No selection>"], "focus": ["<No selection>"]}


def test_trail_table_output() -> None:
    result = runner.invoke(
        app, ["trail", str(mock_file_path("selection.json")), "--anchor", "0/0"]
    )
    assert result.exit_code == 0
    assert "Selection Trail" in result.output
    assert "p[1/2]" in result.output


def test_trail_bad_path_exits_with_error() -> None:
    result = runner.invoke(
        app, ["trail", str(mock_file_path("selection.json")), "--anchor", "0/9"]
    )
    assert result.exit_code == 1
    assert "Error" in result.output


def test_trail_unsupported_document(tmp_path) -> None:
    doc = tmp_path / "doc.txt"
    doc.write_text("hello", encoding="utf-8")
    result = runner.invoke(app, ["trail", str(doc)])
    assert result.exit_code == 1


def test_tree_command_lists_paths() -> None:
    result = runner.invoke(app, ["tree", str(mock_file_path("selection.json"))])
    assert result.exit_code == 0
    assert "span" in result.output
    assert "0/1/0" in result.output


def test_trail_writes_json_to_out_file(tmp_path) -> None:
    out = tmp_path / "trail.json"
    result = runner.invoke(
        app,
        [
            "trail",
            str(mock_file_path("selection.json")),
            "--anchor", "0/1/0",
            "--anchor-offset", "2",
            "--out", str(out),
        ],
    )
    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["anchor"] == ["div", "p[2/2]", "span", "#text[2/5]"]
    assert data["focus"] == data["anchor"]
