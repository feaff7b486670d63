"""Input policy checks applied by callers before normalization.

The normalization pipeline accepts any string; these limits belong to the
surrounding application and mirror the browser editor's rules.
"""

from __future__ import annotations

from .models.datatypes import ValidationState
from .text.charclasses import strip_whitespace
from .text.stats import utf16_length, word_count

DEFAULT_MAX_LENGTH = 6000
DEFAULT_MAX_WORDS = 1000


def validate_content(
    text: str,
    max_length: int = DEFAULT_MAX_LENGTH,
    max_words: int = DEFAULT_MAX_WORDS,
) -> ValidationState:
    """Check `text` against length, emptiness and word-count limits."""

    errors: list[str] = []
    warnings: list[str] = []

    if utf16_length(text) > max_length:
        errors.append(f"Content exceeds maximum length of {max_length} characters")

    if not strip_whitespace(text):
        errors.append("Content cannot be empty")

    words = word_count(text)
    if words > max_words:
        warnings.append(f"Content has {words} words, consider breaking it down")

    return ValidationState(
        is_valid=not errors,
        errors=tuple(errors),
        warnings=tuple(warnings),
    )
