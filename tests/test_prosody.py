"""Tests for Laghu/Guru classification."""

from __future__ import annotations

import pytest

from laghuguru.prosody import GURU, LAGHU, classify, classify_sequence


@pytest.mark.parametrize(
    "syllable",
    ["ಕಾ", "ಕೀ", "ಕೂ", "ಕೇ", "ಕೈ", "ಕೋ", "ಕೌ", "ಆ", "ಈ", "ಊ", "ಏ", "ಐ", "ಓ", "ಔ"],
)
def test_long_vowel_is_guru(syllable: str) -> None:
    assert classify(syllable) == GURU


@pytest.mark.parametrize("syllable", ["ಕಂ", "ಕಃ", "ಅಂ", "ನಿಂ"])
def test_anusvara_visarga_is_guru(syllable: str) -> None:
    assert classify(syllable) == GURU


def test_inherent_vowel_before_conjunct_is_guru() -> None:
    assert classify("ಕ", "ತ್ತ") == GURU


def test_short_sign_before_conjunct_is_guru() -> None:
    assert classify("ಕಿ", "ತ್ತ") == GURU


def test_short_independent_vowel_before_conjunct_is_guru() -> None:
    assert classify("ಅ", "ಕ್ಕ") == GURU


def test_short_vowel_sign_is_laghu() -> None:
    assert classify("ಕಿ") == LAGHU
    assert classify("ಕಿ", "ಕ") == LAGHU


def test_inherent_vowel_without_conjunct_is_laghu() -> None:
    assert classify("ಕ") == LAGHU
    assert classify("ಕ", "ಗ") == LAGHU


def test_conjunct_syllable_has_no_inherent_vowel() -> None:
    # A syllable holding a virama never triggers the lookahead rule
    assert classify("ತ್ತ", "ತ್ತ") == LAGHU


def test_classification_is_repeatable() -> None:
    results = {classify("ಕ", "ತ್ತ") for _ in range(10)}
    assert results == {GURU}


def test_sequence_last_syllable_has_no_lookahead() -> None:
    assert classify_sequence(["ಕ", "ತ್ತ"]) == [GURU, LAGHU]
    assert classify_sequence(["ಹ", "ಕ್ಕಿ", "ಯ"]) == [GURU, LAGHU, LAGHU]
    assert classify_sequence([]) == []
