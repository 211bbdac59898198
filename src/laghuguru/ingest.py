"""
Plain-text extraction from PDF, DOCX and TXT documents.

The analysis engine only ever sees the returned string; this module is the
document-reading capability the command line plugs in front of it.
"""
from pathlib import Path
from typing import Callable

import docx
import fitz  # pymupdf
from tqdm import tqdm

from .kannada import is_kannada


class IngestError(Exception):
    """Base class for document extraction failures."""


class UnsupportedFormatError(IngestError):
    pass


class DocumentReadError(IngestError):
    pass


class GarbledTextError(IngestError):
    pass


# =====================================================================
# Garble detection
# =====================================================================

def kannada_density(text: str) -> float:
    """Percentage of characters in `text` that fall in the Kannada block."""
    if not text:
        return 0.0
    kannada = sum(1 for ch in text if is_kannada(ch))
    return kannada / len(text) * 100


def is_garbled(text: str, threshold: float = 50.0) -> bool:
    """True when non-empty text has too few Kannada characters.

    PDF fonts with custom encodings extract as Latin gibberish, which this
    catches.
    """
    if not text or not text.strip():
        return False
    return kannada_density(text) < threshold


# =====================================================================
# Extractors
# =====================================================================

def extract_txt(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(f"Error reading the file {path}: {e}") from e


def extract_pdf(path: Path) -> str:
    """Concatenate page texts, one newline after each page."""
    try:
        doc = fitz.open(str(path))
    except Exception as e:
        raise DocumentReadError(
            f"Could not parse the PDF file {path}. "
            f"It might be corrupted or in an unsupported format."
        ) from e

    pages = []
    try:
        for page in tqdm(doc, desc="  Reading pages", unit="page"):
            pages.append(page.get_text() + "\n")
    finally:
        doc.close()
    return "".join(pages)


def extract_docx(path: Path) -> str:
    try:
        document = docx.Document(str(path))
    except Exception as e:
        raise DocumentReadError(f"Could not parse the DOCX file {path}.") from e
    return "\n".join(p.text for p in document.paragraphs)


EXTRACTORS: dict[str, Callable[[Path], str]] = {
    ".txt": extract_txt,
    ".pdf": extract_pdf,
    ".docx": extract_docx,
}


def extract_text(path: Path, garble_threshold: float = 50.0) -> str:
    """Extract plain text from `path`, dispatching on its suffix."""
    path = Path(path)
    extractor = EXTRACTORS.get(path.suffix.lower())
    if extractor is None:
        raise UnsupportedFormatError(
            f"Unsupported file type '{path.suffix}'. "
            f"Please use a PDF, DOCX or TXT file."
        )
    if not path.exists():
        raise DocumentReadError(f"File not found: {path}")

    text = extractor(path)

    if extractor is extract_pdf and is_garbled(text, garble_threshold):
        raise GarbledTextError(
            "Failed to extract readable Kannada text from this PDF due to "
            "font encoding issues. Copy and paste the text from your PDF "
            "viewer into a .txt file instead."
        )
    return text
