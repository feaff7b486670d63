"""Text normalization building blocks.

This package provides the ordered normalization stages, the toggle-option
transforms, and the counting rules used for run statistics.
"""

from .cleaners import (
    DEFAULT_STAGES,
    CleanerRule,
    CollapseHorizontalWhitespace,
    DropEmptyLines,
    FixPunctuationSpacing,
    NormalizeBullets,
    NormalizeLineBreaks,
    NormalizeQuotes,
    StripEmails,
    StripHtmlTags,
    StripSpecialCharacters,
    StripUrls,
    TrimLines,
)
from .options import ProcessingOptions, apply_processing_options
from .stats import compute_statistics, content_stats, line_count, utf16_length, word_count

__all__ = [
    "DEFAULT_STAGES",
    "CleanerRule",
    "StripHtmlTags",
    "StripUrls",
    "StripEmails",
    "NormalizeQuotes",
    "FixPunctuationSpacing",
    "NormalizeLineBreaks",
    "NormalizeBullets",
    "CollapseHorizontalWhitespace",
    "TrimLines",
    "DropEmptyLines",
    "StripSpecialCharacters",
    "ProcessingOptions",
    "apply_processing_options",
    "compute_statistics",
    "content_stats",
    "line_count",
    "utf16_length",
    "word_count",
]
