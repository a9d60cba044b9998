"""Document reading module.

Text and Markdown are read directly; PDFs go through PyMuPDF.
"""

from scholarcheck.readers.text_reader import (
    detect_format,
    read_pdf_text,
    read_text,
    supported_formats,
)

__all__ = [
    "read_text",
    "read_pdf_text",
    "detect_format",
    "supported_formats",
]
