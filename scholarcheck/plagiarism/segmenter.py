"""
Text segmentation for plagiarism analysis.

Two independent segmentations of the same text:
- query units: overlapping windows of up to three sentences, used as
  search queries
- report segments: single sentences with exact character offsets, used
  to locate suspicious passages
"""

from __future__ import annotations

import re

from scholarcheck.models import Segment

SENTENCE_END_PATTERN = re.compile(r"[.!?]+")

# Sentences shorter than this (after trimming) are not worth searching for
MIN_SENTENCE_LENGTH = 10

# Sentences per query window
WINDOW_SIZE = 3

# Query windows must be longer than this
MIN_QUERY_LENGTH = 50


def split_sentences(text: str) -> list[Segment]:
    """
    Split text on sentence punctuation, keeping exact offsets.

    Each segment is a trimmed, non-empty sentence; `start_offset` and
    `end_offset` index into the original text, so
    `text[s.start_offset:s.end_offset] == s.text`.

    Example:
        >>> [(s.text, s.start_offset) for s in split_sentences("One. Two?!  Three")]
        [('One', 0), ('Two', 5), ('Three', 12)]
    """
    segments = []
    start = 0
    for boundary in [*SENTENCE_END_PATTERN.finditer(text), None]:
        end = boundary.start() if boundary else len(text)
        piece = text[start:end]
        stripped = piece.strip()
        if stripped:
            offset = start + (len(piece) - len(piece.lstrip()))
            segments.append(Segment(stripped, offset, offset + len(stripped)))
        if boundary:
            start = boundary.end()
    return segments


def segment_for_query(text: str) -> list[str]:
    """
    Build overlapping multi-sentence query units.

    Sentences shorter than MIN_SENTENCE_LENGTH characters are dropped, then
    a window of up to WINDOW_SIZE consecutive sentences slides over the
    rest. Windows of MIN_QUERY_LENGTH characters or fewer are discarded.

    Args:
        text: Text to segment.

    Returns:
        Query strings in text order.
    """
    sentences = [s.text for s in split_sentences(text) if len(s.text) >= MIN_SENTENCE_LENGTH]

    units = []
    for i in range(len(sentences)):
        unit = ". ".join(sentences[i : i + WINDOW_SIZE])
        if len(unit) > MIN_QUERY_LENGTH:
            units.append(unit)
    return units


def segment_for_report(text: str) -> list[Segment]:
    """
    Single-sentence segments with exact offsets, short sentences included.

    Callers decide which sentences are long enough to report on; the
    offsets of later sentences are unaffected by that choice.
    """
    return split_sentences(text)
