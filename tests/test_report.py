"""Tests for report formatting and charts."""

from __future__ import annotations

from pathlib import Path

from laghuguru.analyzer import analyze_prosody
from laghuguru.report import (
    format_highlight,
    format_prosody,
    format_report,
    plot_character_frequency,
    plot_line_weights,
)
from laghuguru.text_stats import analyze_statistics


def test_format_prosody(sample_poem: str) -> None:
    text = format_prosody(analyze_prosody(sample_poem))

    assert text.startswith("LaghuGuru Analysis Report\n")
    assert "Line 1: ನದಿ ತೀರದಲಿ ಹಕ್ಕಿಯ ಕೂಗು\nPattern: L L G L L L G L L G L\n" in text
    assert "Total Laghu (ಲ): 16" in text
    assert "Total Guru (ಗು): 6" in text


def test_format_report_includes_statistics(sample_poem: str) -> None:
    text = format_report(analyze_prosody(sample_poem), analyze_statistics(sample_poem))

    assert "Total words: 8" in text
    assert "Average word length:" in text
    assert "--- Character Frequency ---" in text
    assert "--- 1-gram Frequency ---" in text
    assert "--- 8-gram Frequency ---" in text
    assert "--- 9-gram Frequency ---" not in text


def test_format_highlight() -> None:
    text = format_highlight(analyze_prosody("ಹಕ್ಕಿಯ ಕೂಗು"))
    assert text == "  1: ಹ/G ಕ್ಕಿ/L ಯ/L | ಕೂ/G ಗು/L\n"


def test_plots_are_written(tmp_path: Path, sample_poem: str) -> None:
    chars = tmp_path / "chars.png"
    weights = tmp_path / "weights.png"

    plot_character_frequency(analyze_statistics(sample_poem), chars, top_n=5, dpi=50)
    plot_line_weights(analyze_prosody(sample_poem), weights, dpi=50)

    assert chars.stat().st_size > 0
    assert weights.stat().st_size > 0
