"""Toggle-style processing options.

Responsibilities:
- Apply independently switchable transformations in a fixed order.
- Report results in the same shape as the normalization pipeline.

Unlike the normalization pipeline, options have no ordering dependencies that
users can observe beyond the documented sequence, and none are enabled by
default.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, fields
import re
import time

from ..models.datatypes import ProcessingReport, ProcessingStatistics
from .charclasses import WHITESPACE_BODY, collapse_whitespace, strip_whitespace
from .stats import compute_statistics, utf16_length

_SPECIAL_RE = re.compile(rf"[^A-Za-z0-9_{WHITESPACE_BODY}]")


@dataclass(frozen=True, slots=True)
class ProcessingOptions:
    """Switches for the toggle processing mode.

    Attributes:
        remove_whitespace: Collapse all whitespace runs to one space and trim.
        normalize_line_breaks: Convert CRLF and CR to LF.
        remove_special_chars: Drop characters other than ASCII word characters and whitespace.
        convert_to_uppercase: Uppercase the text.
        convert_to_lowercase: Lowercase the text.
        convert_to_title_case: Capitalize the first character of each space-separated word.
        remove_duplicates: Drop repeated lines, keeping first occurrences.
        sort_lines: Sort lines in code-point order.
        count_words: Request word statistics only; does not transform text.
    """

    remove_whitespace: bool = False
    normalize_line_breaks: bool = False
    remove_special_chars: bool = False
    convert_to_uppercase: bool = False
    convert_to_lowercase: bool = False
    convert_to_title_case: bool = False
    remove_duplicates: bool = False
    sort_lines: bool = False
    count_words: bool = False

    def enabled(self) -> tuple[str, ...]:
        """Return names of enabled options in declaration order."""

        return tuple(item.name for item in fields(self) if getattr(self, item.name))


def _remove_whitespace(text: str) -> str:
    return strip_whitespace(collapse_whitespace(text))


def _normalize_line_breaks(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _remove_special_chars(text: str) -> str:
    return _SPECIAL_RE.sub("", text)


def _title_case(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.lower().split(" "))


def _remove_duplicate_lines(text: str) -> str:
    return "\n".join(dict.fromkeys(text.split("\n")))


def _sort_lines(text: str) -> str:
    return "\n".join(sorted(text.split("\n")))


_OPTION_TRANSFORMS: tuple[tuple[str, Callable[[str], str]], ...] = (
    ("remove_whitespace", _remove_whitespace),
    ("normalize_line_breaks", _normalize_line_breaks),
    ("remove_special_chars", _remove_special_chars),
    ("convert_to_uppercase", str.upper),
    ("convert_to_lowercase", str.lower),
    ("convert_to_title_case", _title_case),
    ("remove_duplicates", _remove_duplicate_lines),
    ("sort_lines", _sort_lines),
)


def apply_processing_options(raw_text: str, options: ProcessingOptions) -> ProcessingReport:
    """Apply enabled options to `raw_text` and report the outcome.

    Options whose transform changed the text are listed in
    `applied_operations`. Unexpected exceptions become a failed report with
    the original length and elapsed time preserved.
    """

    started = time.perf_counter()
    try:
        text = raw_text
        applied: list[str] = []
        for option_name, transform in _OPTION_TRANSFORMS:
            if not getattr(options, option_name):
                continue
            transformed = transform(text)
            if transformed != text:
                applied.append(option_name)
            text = transformed
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        return ProcessingReport(
            success=True,
            processed_text=text,
            statistics=compute_statistics(raw_text, text, elapsed_ms),
            applied_operations=tuple(applied),
        )
    except Exception as exc:
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        return ProcessingReport(
            success=False,
            processed_text="",
            statistics=ProcessingStatistics(
                original_length=utf16_length(raw_text),
                processed_length=0,
                words_removed=0,
                lines_removed=0,
                processing_time_ms=elapsed_ms,
            ),
            errors=(str(exc) or type(exc).__name__,),
        )
