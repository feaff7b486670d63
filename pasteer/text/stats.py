"""Counting rules shared by the pipeline, toggle options and exporters.

Responsibilities:
- Measure text the same way the browser application does (UTF-16 code units).
- Keep word/line counting identical for input and output so differences are meaningful.
"""

from __future__ import annotations

from ..models.datatypes import ContentStats, ProcessingStatistics
from .charclasses import split_words


def utf16_length(text: str) -> int:
    """Return the length of `text` in UTF-16 code units.

    Characters outside the Basic Multilingual Plane count as two units; lone
    surrogates count as one.
    """

    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def word_count(text: str) -> int:
    """Count whitespace-separated words; blank text has zero words."""

    return len(split_words(text))


def line_count(text: str) -> int:
    """Count LF-separated lines; the empty string has zero lines."""

    if not text:
        return 0
    return text.count("\n") + 1


def content_stats(text: str) -> ContentStats:
    """Return character, word and line counts for one text buffer."""

    return ContentStats(
        character_count=utf16_length(text),
        word_count=word_count(text),
        line_count=line_count(text),
    )


def compute_statistics(
    original: str,
    processed: str,
    processing_time_ms: int,
) -> ProcessingStatistics:
    """Compare raw input against final text."""

    return ProcessingStatistics(
        original_length=utf16_length(original),
        processed_length=utf16_length(processed),
        words_removed=word_count(original) - word_count(processed),
        lines_removed=line_count(original) - line_count(processed),
        processing_time_ms=max(0, int(processing_time_ms)),
    )
