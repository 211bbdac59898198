"""
Laghu/Guru classification of Kannada syllables (Chandas rules).

Rules, first match wins:
1. Long vowel (sign or independent letter) -> Guru
2. Anusvara or visarga -> Guru
3. Short vowel (explicit or inherent 'a') followed by a syllable that
   contains a virama (a conjunct, ottakshara) -> Guru
4. Otherwise -> Laghu
"""
from typing import Optional

from .kannada import (
    has_inherent_vowel, has_long_vowel, has_modifier, has_short_vowel,
    has_virama,
)

LAGHU = "L"
GURU = "G"


def classify(syllable: str, next_syllable: Optional[str] = None) -> str:
    """Return LAGHU or GURU for `syllable` given the following syllable."""
    if has_long_vowel(syllable):
        return GURU

    if has_modifier(syllable):
        return GURU

    short = has_short_vowel(syllable) or has_inherent_vowel(syllable)
    if short and next_syllable and has_virama(next_syllable):
        return GURU

    return LAGHU


def classify_sequence(syllables: list[str]) -> list[str]:
    """Classify a line's syllables with one-syllable lookahead.

    The last syllable never looks across the line boundary.
    """
    labels = []
    for i, syllable in enumerate(syllables):
        following = syllables[i + 1] if i + 1 < len(syllables) else None
        labels.append(classify(syllable, following))
    return labels
