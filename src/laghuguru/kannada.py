"""
Kannada Unicode classification tables.

All tables are frozensets built once at import time. The predicates below
are the only vocabulary shared by the syllabifier, the prosody classifier
and the statistics engine.
"""


def _char_range(first: int, last: int) -> frozenset:
    return frozenset(chr(cp) for cp in range(first, last + 1))


# =====================================================================
# Tables
# =====================================================================

KANNADA_BLOCK_START = 0x0C80
KANNADA_BLOCK_END = 0x0CFF

CONSONANTS = _char_range(0x0C95, 0x0CB9)
INDEPENDENT_VOWELS = _char_range(0x0C85, 0x0C94)
VOWEL_SIGNS = (
    _char_range(0x0CBE, 0x0CC4)
    | _char_range(0x0CC6, 0x0CC8)
    | _char_range(0x0CCA, 0x0CCC)
)

ANUSVARA = "\u0C82"   # ಂ
VISARGA = "\u0C83"    # ಃ
VIRAMA = "\u0CCD"     # ್
MODIFIERS = frozenset({ANUSVARA, VISARGA})

# ಿ ು ೃ ೆ ೊ
SHORT_VOWEL_SIGNS = frozenset("\u0CBF\u0CC1\u0CC3\u0CC6\u0CCA")
# ಾ ೀ ೂ ೄ ೇ ೈ ೋ ೌ
LONG_VOWEL_SIGNS = frozenset(
    "\u0CBE\u0CC0\u0CC2\u0CC4\u0CC7\u0CC8\u0CCB\u0CCC"
)
# ಅ ಇ ಉ ಋ ಎ ಒ
SHORT_INDEPENDENT_VOWELS = frozenset("\u0C85\u0C87\u0C89\u0C8B\u0C8E\u0C92")
# ಆ ಈ ಊ ಌ ಏ ಐ ಓ ಔ
LONG_INDEPENDENT_VOWELS = frozenset(
    "\u0C86\u0C88\u0C8A\u0C8C\u0C8F\u0C90\u0C93\u0C94"
)

# Danda, double danda, full stop
SENTENCE_TERMINALS = frozenset("\u0964\u0965.")


# =====================================================================
# Predicates
# =====================================================================

def is_consonant(ch: str) -> bool:
    return ch in CONSONANTS


def is_independent_vowel(ch: str) -> bool:
    return ch in INDEPENDENT_VOWELS


def is_vowel_sign(ch: str) -> bool:
    return ch in VOWEL_SIGNS


def is_modifier(ch: str) -> bool:
    """Anusvara or visarga."""
    return ch in MODIFIERS


def is_virama(ch: str) -> bool:
    return ch == VIRAMA


def is_kannada(ch: str) -> bool:
    """True for any code point in the Kannada block (U+0C80..U+0CFF)."""
    return KANNADA_BLOCK_START <= ord(ch) <= KANNADA_BLOCK_END


def has_long_vowel(syllable: str) -> bool:
    return any(
        ch in LONG_VOWEL_SIGNS or ch in LONG_INDEPENDENT_VOWELS
        for ch in syllable
    )


def has_short_vowel(syllable: str) -> bool:
    """Explicit short vowel sign or short independent vowel."""
    return any(
        ch in SHORT_VOWEL_SIGNS or ch in SHORT_INDEPENDENT_VOWELS
        for ch in syllable
    )


def has_explicit_vowel(syllable: str) -> bool:
    return any(
        ch in VOWEL_SIGNS or ch in INDEPENDENT_VOWELS for ch in syllable
    )


def has_modifier(syllable: str) -> bool:
    return any(ch in MODIFIERS for ch in syllable)


def has_virama(syllable: str) -> bool:
    return VIRAMA in syllable


def has_inherent_vowel(syllable: str) -> bool:
    """No explicit vowel and no virama: the consonant carries a short 'a'."""
    return not has_explicit_vowel(syllable) and not has_virama(syllable)


def contains_sentence_terminal(text: str) -> bool:
    return any(ch in SENTENCE_TERMINALS for ch in text)
