"""
Result types for prosody and statistics analyses.

All results are frozen dataclasses built fresh for every call; sequences
are tuples so nothing can be mutated after construction.
"""
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class Syllable:
    """One classified syllable: text plus 'L' (Laghu) or 'G' (Guru)."""
    text: str
    type: str

    def to_dict(self) -> dict:
        return {"text": self.text, "type": self.type}


@dataclass(frozen=True)
class Word:
    """A whitespace-delimited token of a line and the syllables it holds."""
    source_text: str
    syllables: tuple = ()

    def to_dict(self) -> dict:
        return {
            "source_text": self.source_text,
            "syllables": [s.to_dict() for s in self.syllables],
        }


@dataclass(frozen=True)
class Line:
    index: int
    original_text: str
    syllables: tuple = ()
    words: tuple = ()
    pattern: str = ""

    @property
    def laghu_count(self) -> int:
        return sum(1 for s in self.syllables if s.type == "L")

    @property
    def guru_count(self) -> int:
        return sum(1 for s in self.syllables if s.type == "G")

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "original_text": self.original_text,
            "syllables": [s.to_dict() for s in self.syllables],
            "words": [w.to_dict() for w in self.words],
            "pattern": self.pattern,
        }


@dataclass(frozen=True)
class PoemAnalysis:
    lines: tuple = ()
    total_laghu: int = 0
    total_guru: int = 0

    @property
    def total_syllables(self) -> int:
        return self.total_laghu + self.total_guru

    def to_dict(self) -> dict:
        return {
            "lines": [line.to_dict() for line in self.lines],
            "total_laghu": self.total_laghu,
            "total_guru": self.total_guru,
        }


@dataclass(frozen=True)
class CharacterCount:
    character: str
    count: int

    def to_dict(self) -> dict:
        return {"character": self.character, "count": self.count}


@dataclass(frozen=True)
class NGram:
    """A phrase of n space-joined words and its occurrence count."""
    phrase: str
    count: int

    def to_dict(self) -> dict:
        return {"phrase": self.phrase, "count": self.count}


@dataclass(frozen=True)
class TextStatsAnalysis:
    total_words: int = 0
    total_sentences: int = 0
    average_words_per_sentence: float = 0.0
    average_word_length: float = 0.0
    character_frequency: tuple = ()
    # Read-only n -> phrases mapping; left out of the hash
    ngram_frequencies: MappingProxyType = field(
        default_factory=lambda: MappingProxyType({}), hash=False,
    )

    def to_dict(self) -> dict:
        return {
            "total_words": self.total_words,
            "total_sentences": self.total_sentences,
            "average_words_per_sentence": self.average_words_per_sentence,
            "average_word_length": self.average_word_length,
            "character_frequency": [c.to_dict() for c in self.character_frequency],
            "ngram_frequencies": {
                str(n): [g.to_dict() for g in grams]
                for n, grams in self.ngram_frequencies.items()
            },
        }
