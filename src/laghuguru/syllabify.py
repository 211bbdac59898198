"""
Syllabification of a single line of Kannada text.

A syllable is either a consonant cluster (consonants joined by the virama)
with an optional vowel sign and an optional anusvara/visarga, or an
independent vowel with an optional anusvara/visarga. Anything else
(whitespace, punctuation, digits, Latin text) is skipped.
"""
from typing import Iterator

from .kannada import (
    is_consonant, is_independent_vowel, is_modifier, is_virama, is_vowel_sign,
)


def iter_syllable_spans(line: str) -> Iterator[tuple[int, int]]:
    """Yield (start, end) offsets of each syllable in left-to-right order."""
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if is_consonant(ch):
            j = i + 1
            # Conjunct: virama followed by another consonant
            while j + 1 < n and is_virama(line[j]) and is_consonant(line[j + 1]):
                j += 2
            if j < n and is_vowel_sign(line[j]):
                j += 1
            if j < n and is_modifier(line[j]):
                j += 1
            yield i, j
            i = j
        elif is_independent_vowel(ch):
            j = i + 1
            if j < n and is_modifier(line[j]):
                j += 1
            yield i, j
            i = j
        else:
            i += 1


def segment(line: str) -> list[str]:
    """Split a trimmed line into its ordered syllable substrings."""
    return [line[start:end] for start, end in iter_syllable_spans(line)]
