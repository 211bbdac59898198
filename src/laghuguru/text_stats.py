"""
Corpus statistics over raw Kannada text.

Computes:
- Sentence and word counts
- Average words per sentence and average word length
- Kannada character frequencies (in collation order)
- Word n-gram frequencies for n = 1..15
"""
import re
import functools
from collections import Counter
from decimal import Decimal, ROUND_HALF_UP
from types import MappingProxyType

import numpy as np
from pyuca import Collator

from .analyzer import load_input
from .config import ToolkitConfig
from .models import CharacterCount, NGram, TextStatsAnalysis
from .kannada import is_kannada
from .utils import print_header, print_step, save_json, timer

SENTENCE_SPLIT_RE = re.compile(r"[।॥.]+")

# Stripped from words before splitting on whitespace
WORD_PUNCTUATION = "।॥.,!?;:()[]{}\"'“”‘’"
_PUNCT_TABLE = str.maketrans({ch: " " for ch in WORD_PUNCTUATION})

MAX_NGRAM = 15
TOP_K_UNIGRAMS = 20
TOP_K_NGRAMS = 10


@functools.lru_cache(maxsize=1)
def _collator() -> Collator:
    return Collator()


def round_half_up(value: float, places: int = 2) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


# =====================================================================
# Tokenization
# =====================================================================

def split_sentences(text: str) -> list[str]:
    """Split on runs of danda, double danda and full stop."""
    return [s for s in SENTENCE_SPLIT_RE.split(text) if s.strip()]


def split_words(text: str) -> list[str]:
    return text.translate(_PUNCT_TABLE).split()


# =====================================================================
# Frequencies
# =====================================================================

def character_frequency(text: str) -> tuple:
    """Count every Kannada-block character, sorted by Kannada collation."""
    counter = Counter(ch for ch in text if is_kannada(ch))
    key = _collator().sort_key
    return tuple(
        CharacterCount(character=ch, count=counter[ch])
        for ch in sorted(counter, key=key)
    )


def ngram_table(words: list[str], n: int, top_k: int) -> tuple:
    """Top `top_k` n-word phrases by count; ties keep first-seen order."""
    counter = Counter(
        " ".join(words[i:i + n]) for i in range(len(words) - n + 1)
    )
    return tuple(
        NGram(phrase=phrase, count=count)
        for phrase, count in counter.most_common(top_k)
    )


def ngram_frequencies(
    words: list[str],
    max_n: int = MAX_NGRAM,
    top_k_unigrams: int = TOP_K_UNIGRAMS,
    top_k_ngrams: int = TOP_K_NGRAMS,
) -> MappingProxyType:
    """n -> ranked phrases, for every n up to `max_n` that has windows."""
    tables = {}
    for n in range(1, max_n + 1):
        if len(words) < n:
            break
        top_k = top_k_unigrams if n == 1 else top_k_ngrams
        table = ngram_table(words, n, top_k)
        if table:
            tables[n] = table
    return MappingProxyType(tables)


# =====================================================================
# Entry point
# =====================================================================

def analyze_statistics(
    text: str,
    max_n: int = MAX_NGRAM,
    top_k_unigrams: int = TOP_K_UNIGRAMS,
    top_k_ngrams: int = TOP_K_NGRAMS,
) -> TextStatsAnalysis:
    """Descriptive statistics for the original, unreformatted text."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    words = split_words(text)
    total_words = len(words)
    if total_words == 0:
        return TextStatsAnalysis()

    # A sentence-less text counts as one sentence
    total_sentences = len(split_sentences(text)) or 1

    lengths = np.array([len(w) for w in words])
    return TextStatsAnalysis(
        total_words=total_words,
        total_sentences=total_sentences,
        average_words_per_sentence=round_half_up(total_words / total_sentences),
        average_word_length=round_half_up(float(lengths.sum()) / total_words),
        character_frequency=character_frequency(text),
        ngram_frequencies=ngram_frequencies(
            words, max_n, top_k_unigrams, top_k_ngrams,
        ),
    )


compute_stats = analyze_statistics


@timer
def compute_document_stats(text: str, config: ToolkitConfig) -> TextStatsAnalysis:
    return analyze_statistics(
        text,
        max_n=config.max_ngram,
        top_k_unigrams=config.top_k_unigrams,
        top_k_ngrams=config.top_k_ngrams,
    )


def run(config: ToolkitConfig, force: bool = False) -> None:
    """Entry point for the statistics command."""
    print_header("LAGHUGURU - Text Statistics")
    config.ensure_dirs()

    report_path = config.stats_dir / "text_stats.json"
    if report_path.exists() and not force:
        print("  Statistics already present, skip (use --force to rerun)")
        return

    print_step(f"Reading {config.input_path}...")
    text = load_input(config)

    print_step("Tokenization, character and n-gram frequencies...")
    stats = compute_document_stats(text, config)

    save_json(stats.to_dict(), report_path)

    print(f"\n  Words:                 {stats.total_words}")
    print(f"  Sentences:             {stats.total_sentences}")
    print(f"  Avg words/sentence:    {stats.average_words_per_sentence}")
    print(f"  Avg word length:       {stats.average_word_length}")
    print(f"  Distinct characters:   {len(stats.character_frequency)}")
    unigrams = stats.ngram_frequencies.get(1, ())
    if unigrams:
        print("\n  Top 5 words:")
        for gram in unigrams[:5]:
            bar = "#" * min(gram.count, 40)
            print(f"    {gram.phrase}: {gram.count:5d} {bar}")
    print(f"\n  Full statistics: {report_path}")
