"""Shared fixtures for the LaghuGuru test-suite."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_POEM = "ನದಿ ತೀರದಲಿ ಹಕ್ಕಿಯ ಕೂಗು\nಮರದ ನಿಂತರಲಿ ಗಾಳಿ ಬೀಸು"


@pytest.fixture
def sample_poem() -> str:
    return SAMPLE_POEM


@pytest.fixture
def poem_file(tmp_path: Path) -> Path:
    path = tmp_path / "poem.txt"
    path.write_text("ರಾಮ ಬಂದನು. ಸೀತೆ ನಕ್ಕಳು।\n" + SAMPLE_POEM + "\n", encoding="utf-8")
    return path
