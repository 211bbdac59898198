"""
Display re-wrapping of long lines before prosody analysis.

Breaks replace the whitespace run they fall on; whitespace inside a piece
is kept as written, so syllable content is never altered.
"""
import re

_WHITESPACE_RE = re.compile(r"(\s+)")


def wrap_line(line: str, max_width: int) -> list[str]:
    """Break one line into pieces of at most `max_width` characters.

    A single word longer than `max_width` is kept whole on its own piece.
    """
    if max_width <= 0 or len(line) <= max_width:
        return [line]

    parts = _WHITESPACE_RE.split(line)
    pieces = []
    current = parts[0]
    for sep, word in zip(parts[1::2], parts[2::2]):
        if not current.strip() or len(current) + len(sep) + len(word) <= max_width:
            current += sep + word
        elif not word:
            # Trailing whitespace stays on the last piece
            current += sep
        else:
            pieces.append(current)
            current = word
    pieces.append(current)
    return pieces


def wrap_lines(text: str, max_width: int) -> str:
    """Apply `wrap_line` to every line of `text`."""
    if max_width <= 0:
        return text
    out = []
    for line in text.split("\n"):
        out.extend(wrap_line(line, max_width))
    return "\n".join(out)
