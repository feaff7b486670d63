"""Deterministic text normalization stages.

Responsibilities:
- Provide one named rule per normalization stage.
- Fix the stage order used by the normalization pipeline.

Every rule is stateless: `apply` depends only on its argument, so rules may be
shared between pipelines and threads.
"""

from __future__ import annotations

import re
from typing import Protocol

from .charclasses import (
    LINE_START,
    NON_WHITESPACE,
    WHITESPACE,
    WHITESPACE_BODY,
    collapse_whitespace,
    strip_whitespace,
)


class CleanerRule(Protocol):
    """Protocol for a named text normalization stage."""

    key: str
    name: str

    def apply(self, text: str) -> str:
        """Apply a single normalization transformation."""


_PUNCTUATION = ".,!?;:"

# Windows-1252 renderings of UTF-8 encoded glyphs.
_MOJIBAKE_QUOTES = (
    ("â€œ", '"'),
    ("â€\u009d", '"'),
    ("â€˜", "'"),
    ("â€™", "'"),
)
_MOJIBAKE_BULLETS = (
    "â€¢",
    "Â·",
    "â–ª",
    "â–«",
    "â€£",
    "â—¦",
)
_MOJIBAKE_DASHES = (
    "â€“",
    "â€”",
)

_QUOTE_TRANSLATION = str.maketrans(
    {
        "“": '"',
        "”": '"',
        "„": '"',
        "‟": '"',
        "‘": "'",
        "’": "'",
        "‚": "'",
        "‛": "'",
        "ʼ": "'",
    }
)

_BULLET_GLYPHS = "•·▪▫‣⁃◦∙●■□"
_DASH_GLYPHS = "-–—"


def _marker_alternation(sequences: tuple[str, ...], glyphs: str) -> str:
    """Build a regex alternation of multi-character sequences and single glyphs."""

    alternatives = [re.escape(sequence) for sequence in sequences]
    alternatives.append(f"[{re.escape(glyphs)}]")
    return "|".join(alternatives)


def _line_marker_pattern(marker: str, trailing: str = "*") -> re.Pattern[str]:
    """Compile a line-anchored list marker surrounded by optional whitespace."""

    return re.compile(
        rf"{LINE_START}{WHITESPACE}*(?:{marker}){WHITESPACE}{trailing}",
        re.MULTILINE,
    )


class StripHtmlTags:
    """Remove anything shaped like a markup tag.

    Matching is lexical: `<` up to the next `>`, so an unclosed `<` is kept
    and `a < b > c` loses `< b >`.
    """

    key = "strip_html_tags"
    name = "Removed HTML tags"
    _TAG_RE = re.compile(r"<[^>]*>")

    def apply(self, text: str) -> str:
        """Delete every tag-shaped substring."""

        return self._TAG_RE.sub("", text)


class StripUrls:
    """Remove `http://` and `https://` URLs up to the next whitespace."""

    key = "strip_urls"
    name = "Removed URLs"
    _URL_RE = re.compile(rf"https?://{NON_WHITESPACE}+")

    def apply(self, text: str) -> str:
        """Delete URL substrings."""

        return self._URL_RE.sub("", text)


class StripEmails:
    """Remove email-address-shaped substrings."""

    key = "strip_emails"
    name = "Removed email addresses"
    _EMAIL_RE = re.compile(
        r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b",
        re.ASCII,
    )

    def apply(self, text: str) -> str:
        """Delete email addresses."""

        return self._EMAIL_RE.sub("", text)


class NormalizeQuotes:
    """Convert curly and typographic quotes to ASCII equivalents."""

    key = "normalize_quotes"
    name = "Normalized quotes"

    def apply(self, text: str) -> str:
        """Replace smart quotes, including their mojibake forms."""

        for sequence, replacement in _MOJIBAKE_QUOTES:
            text = text.replace(sequence, replacement)
        return text.translate(_QUOTE_TRANSLATION)


class FixPunctuationSpacing:
    """Tighten whitespace around `.,!?;:`.

    Whitespace before a mark is removed, exactly one space follows each mark,
    and then every whitespace run (line breaks included) becomes one space.
    """

    key = "fix_punctuation_spacing"
    name = "Fixed spacing around punctuation"
    # Anchored at the start of a whitespace run; matches the same spans as `\s+([...])`.
    _SPACE_BEFORE_RE = re.compile(
        rf"(?<!{WHITESPACE}){WHITESPACE}+([{re.escape(_PUNCTUATION)}])"
    )
    _SPACE_AFTER_RE = re.compile(rf"([{re.escape(_PUNCTUATION)}]){WHITESPACE}*")

    def apply(self, text: str) -> str:
        """Apply the three spacing substitutions in order."""

        text = self._SPACE_BEFORE_RE.sub(r"\1", text)
        text = self._SPACE_AFTER_RE.sub(r"\1 ", text)
        return collapse_whitespace(text)


class NormalizeLineBreaks:
    """Convert CRLF and lone CR to LF."""

    key = "normalize_line_breaks"
    name = "Normalized line breaks"

    def apply(self, text: str) -> str:
        """Normalize line terminators."""

        return text.replace("\r\n", "\n").replace("\r", "\n")


class NormalizeBullets:
    """Rewrite line-leading list markers as `* `.

    Glyph bullets are handled first, then dashes, then a lowercase `o`
    followed by whitespace. Leading whitespace may span blank lines, which
    are absorbed into the rewritten marker.
    """

    key = "normalize_bullets"
    name = "Normalized bullet points"
    _GLYPH_RE = _line_marker_pattern(_marker_alternation(_MOJIBAKE_BULLETS, _BULLET_GLYPHS))
    _DASH_RE = _line_marker_pattern(_marker_alternation(_MOJIBAKE_DASHES, _DASH_GLYPHS))
    _LETTER_O_RE = _line_marker_pattern("o", trailing="+")

    def apply(self, text: str) -> str:
        """Replace bullet markers line by line."""

        text = self._GLYPH_RE.sub("* ", text)
        text = self._DASH_RE.sub("* ", text)
        return self._LETTER_O_RE.sub("* ", text)


class CollapseHorizontalWhitespace:
    """Convert runs of spaces and tabs to a single space."""

    key = "collapse_horizontal_whitespace"
    name = "Removed redundant spaces"
    _RUN_RE = re.compile(r"[ \t]+")

    def apply(self, text: str) -> str:
        """Collapse horizontal whitespace, leaving line breaks intact."""

        return self._RUN_RE.sub(" ", text)


class TrimLines:
    """Strip leading and trailing whitespace from each line."""

    key = "trim_lines"
    name = "Trimmed leading/trailing whitespace"

    def apply(self, text: str) -> str:
        """Trim every LF-separated line independently."""

        return "\n".join(strip_whitespace(line) for line in text.split("\n"))


class DropEmptyLines:
    """Remove lines that are empty or whitespace-only."""

    key = "drop_empty_lines"
    name = "Removed empty lines"

    def apply(self, text: str) -> str:
        """Keep only lines with visible content."""

        return "\n".join(line for line in text.split("\n") if strip_whitespace(line))


class StripSpecialCharacters:
    """Remove everything except ASCII letters, digits, underscore and whitespace.

    This also deletes punctuation spaced by `FixPunctuationSpacing` and the
    `*` markers written by `NormalizeBullets`.
    """

    key = "strip_special_characters"
    name = "Removed special characters"
    _SPECIAL_RE = re.compile(rf"[^A-Za-z0-9_{WHITESPACE_BODY}]")

    def apply(self, text: str) -> str:
        """Delete special characters."""

        return self._SPECIAL_RE.sub("", text)


DEFAULT_STAGES: tuple[CleanerRule, ...] = (
    StripHtmlTags(),
    StripUrls(),
    StripEmails(),
    NormalizeQuotes(),
    FixPunctuationSpacing(),
    NormalizeLineBreaks(),
    NormalizeBullets(),
    CollapseHorizontalWhitespace(),
    TrimLines(),
    DropEmptyLines(),
    StripSpecialCharacters(),
)
