"""
Plain-text extraction for analysis input.

Reads .txt and Markdown files as UTF-8 and extracts PDF text with
PyMuPDF (fitz). Both engines work on the returned plain text; no layout
or structure is preserved beyond page breaks.
"""

from __future__ import annotations

import logging
from pathlib import Path

import fitz  # PyMuPDF

from scholarcheck.exceptions import ExtractionError, UnsupportedFormatError

logger = logging.getLogger(__name__)

EXTENSION_FORMATS = {
    ".txt": "text",
    ".text": "text",
    ".md": "markdown",
    ".markdown": "markdown",
    ".pdf": "pdf",
}

# Separator between the text of consecutive PDF pages
PAGE_SEPARATOR = "\n\n"


def detect_format(path: str | Path) -> str:
    """
    Detect document format from file extension and magic bytes.

    Args:
        path: Path to document file

    Returns:
        Format string: "text", "markdown" or "pdf".

    Raises:
        UnsupportedFormatError: If format cannot be detected or isn't supported
    """
    path = Path(path)

    ext = path.suffix.lower()
    if ext in EXTENSION_FORMATS:
        return EXTENSION_FORMATS[ext]

    # Extension-less PDFs
    if not ext:
        try:
            with open(path, "rb") as f:
                if f.read(8).startswith(b"%PDF"):
                    return "pdf"
        except OSError:
            pass

    raise UnsupportedFormatError(f"Cannot detect format for: {path}")


def supported_formats() -> list[str]:
    """Return list of currently supported input formats."""
    return sorted(set(EXTENSION_FORMATS.values()))


def read_pdf_text(path: Path) -> str:
    """
    Extract the plain text of every page of a PDF.

    Raises:
        ExtractionError: If the file cannot be opened as a PDF.
    """
    try:
        doc = fitz.open(path)
    except Exception as e:
        raise ExtractionError(f"Failed to open PDF: {e}") from e

    try:
        pages = [doc[i].get_text("text").strip() for i in range(len(doc))]
    finally:
        doc.close()

    logger.debug("Extracted %d pages from %s", len(pages), path)
    return PAGE_SEPARATOR.join(pages)


def read_text(path: str | Path) -> str:
    """
    Read a document as plain text.

    Args:
        path: Path to a .txt, .md or .pdf file.

    Returns:
        The document text.

    Raises:
        UnsupportedFormatError: If the format isn't supported.
        ExtractionError: If the file is missing or can't be read.

    Example:
        >>> text = read_text("essay.pdf")
        >>> scholarcheck.check_spelling(text).error_count
    """
    path = Path(path)
    if not path.exists():
        raise ExtractionError(f"File not found: {path}")

    fmt = detect_format(path)
    logger.info("Reading %s as %s", path, fmt)

    if fmt == "pdf":
        return read_pdf_text(path)

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ExtractionError(f"Failed to read {path}: {e}") from e
