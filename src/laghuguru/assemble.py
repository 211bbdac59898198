"""
Regroups classified syllables by source word and builds the L/G pattern.
"""
from .kannada import contains_sentence_terminal
from .models import Line, Syllable, Word


def group_words(original_text: str, syllables: list[Syllable]) -> tuple:
    """Assign syllables to the whitespace-delimited tokens of a line.

    Syllables are consumed greedily into the current token until their
    cumulative length reaches the token's length. This is a length budget,
    not a span match: a token that mixes in digits, Latin letters or fused
    punctuation can pull the next token's syllables into it.
    """
    words = []
    pos = 0
    for token in original_text.split():
        consumed = []
        length = 0
        while pos < len(syllables) and length < len(token):
            consumed.append(syllables[pos])
            length += len(syllables[pos].text)
            pos += 1
        words.append(Word(source_text=token, syllables=tuple(consumed)))
    return tuple(words)


def build_pattern(original_text: str, syllables: list[Syllable],
                  spans: list[tuple[int, int]]) -> str:
    """Join L/G markers with spaces, breaking the line after any syllable
    whose following interstitial text holds a sentence terminal.

    `spans` are the (start, end) offsets the syllabifier matched for each
    syllable in `original_text`.
    """
    if not syllables:
        return ""

    parts = []
    last = len(syllables) - 1
    for i, syllable in enumerate(syllables):
        parts.append(syllable.type)
        if i == last:
            break
        between = original_text[spans[i][1]:spans[i + 1][0]]
        parts.append("\n" if contains_sentence_terminal(between) else " ")

    return "".join(parts).rstrip()


def assemble_line(index: int, original_text: str, syllables: list[Syllable],
                  spans: list[tuple[int, int]]) -> Line:
    return Line(
        index=index,
        original_text=original_text,
        syllables=tuple(syllables),
        words=group_words(original_text, syllables),
        pattern=build_pattern(original_text, syllables, spans),
    )
