"""Tests for the command line interface."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from laghuguru.cli import cli


def _invoke(*args: str):
    return CliRunner().invoke(cli, list(args))


def test_prosody_command(poem_file: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"
    result = _invoke("--input", str(poem_file), "--output-dir", str(out), "prosody")

    assert result.exit_code == 0, result.output
    data = json.loads((out / "prosody" / "prosody.json").read_text(encoding="utf-8"))
    assert len(data["lines"]) == 3
    assert data["total_laghu"] + data["total_guru"] == sum(
        len(line["syllables"]) for line in data["lines"]
    )


def test_existing_output_is_skipped(poem_file: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"
    _invoke("--input", str(poem_file), "--output-dir", str(out), "stats")
    result = _invoke("--input", str(poem_file), "--output-dir", str(out), "stats")

    assert result.exit_code == 0
    assert "already present" in result.output

    forced = _invoke("--input", str(poem_file), "--output-dir", str(out), "--force", "stats")
    assert "already present" not in forced.output


def test_stats_top_k(poem_file: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"
    result = _invoke("--input", str(poem_file), "--output-dir", str(out), "stats", "--top-k", "2")

    assert result.exit_code == 0, result.output
    data = json.loads((out / "stats" / "text_stats.json").read_text(encoding="utf-8"))
    assert len(data["ngram_frequencies"]["1"]) == 2


def test_missing_input(tmp_path: Path) -> None:
    result = _invoke("--input", str(tmp_path / "nope.txt"), "--output-dir", str(tmp_path), "prosody")

    assert result.exit_code == 1
    assert "File not found" in result.output


def test_unsupported_input(tmp_path: Path) -> None:
    path = tmp_path / "poem.odt"
    path.write_text("ಕ", encoding="utf-8")
    result = _invoke("--input", str(path), "--output-dir", str(tmp_path / "out"), "stats")

    assert result.exit_code == 1
    assert "Unsupported file type" in result.output


def test_run_all(poem_file: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"
    result = _invoke("--input", str(poem_file), "--output-dir", str(out), "run-all")

    assert result.exit_code == 0, result.output
    assert (out / "prosody" / "prosody.json").exists()
    assert (out / "stats" / "text_stats.json").exists()
    report = (out / "report" / "laghuguru_analysis.txt").read_text(encoding="utf-8")
    assert report.startswith("LaghuGuru Analysis Report")
    assert (out / "report" / "highlight.txt").exists()
    assert (out / "report" / "analysis.json").exists()
    assert (out / "report" / "line_weights.png").exists()
