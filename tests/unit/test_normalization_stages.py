"""Unit tests for individual normalization stages and their fixed order."""

from __future__ import annotations

import re

import pytest

from pasteer.text.cleaners import (
    DEFAULT_STAGES,
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


def test_default_stage_order_is_fixed() -> None:
    """Default stages should run in the documented order."""

    assert [stage.key for stage in DEFAULT_STAGES] == [
        "strip_html_tags",
        "strip_urls",
        "strip_emails",
        "normalize_quotes",
        "fix_punctuation_spacing",
        "normalize_line_breaks",
        "normalize_bullets",
        "collapse_horizontal_whitespace",
        "trim_lines",
        "drop_empty_lines",
        "strip_special_characters",
    ]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("<b>Hi</b> there", "Hi there"),
        ("a < b > c", "a  c"),
        ("1 < 2", "1 < 2"),
        ("<div\nclass='x'>text</div>", "text"),
        ("<<b>>", ">"),
    ],
)
def test_strip_html_tags_is_lexical(raw: str, expected: str) -> None:
    """Tag stripping should remove `<...>` spans without parsing markup."""

    assert StripHtmlTags().apply(raw) == expected


def test_strip_urls_removes_until_whitespace() -> None:
    """URL stripping should consume trailing punctuation glued to the URL."""

    stage = StripUrls()

    assert stage.apply("Visit https://example.com/path?q=1 now") == "Visit  now"
    assert stage.apply("see http://a.b, then") == "see  then"
    assert stage.apply("ftp://files.example.org stays") == "ftp://files.example.org stays"


def test_strip_emails_requires_alphabetic_top_level_label() -> None:
    """Email stripping should match standard shapes only."""

    stage = StripEmails()

    assert stage.apply("Mail jane.doe+tag@example.co.uk today") == "Mail  today"
    assert stage.apply("user@localhost") == "user@localhost"
    assert stage.apply("a@b.c") == "a@b.c"


def test_normalize_quotes_handles_curly_and_mojibake_forms() -> None:
    """Smart quotes and their Windows-1252 mojibake should become ASCII."""

    stage = NormalizeQuotes()

    assert stage.apply("“Hi” ‘there’ it’s") == "\"Hi\" 'there' it's"
    assert stage.apply("â€œHiâ€\u009d itâ€™s") == "\"Hi\" it's"


def test_fix_punctuation_spacing_tightens_and_flattens_whitespace() -> None:
    """Punctuation spacing should also collapse line breaks into spaces."""

    stage = FixPunctuationSpacing()

    assert stage.apply("Hello , world !") == "Hello, world! "
    assert stage.apply("a,b;c") == "a, b; c"
    assert stage.apply("one\ntwo") == "one two"
    assert stage.apply("Wait ...ok") == "Wait. . . ok"
    assert stage.apply("plain") == "plain"


def test_fix_punctuation_spacing_handles_long_whitespace_runs() -> None:
    """Long whitespace runs should collapse without special cases."""

    stage = FixPunctuationSpacing()

    assert stage.apply("a" + " " * 5000 + "b") == "a b"
    assert stage.apply("a" + " " * 5000 + ".") == "a. "


def test_normalize_line_breaks_converts_crlf_and_cr() -> None:
    """CRLF and lone CR should both become LF."""

    assert NormalizeLineBreaks().apply("a\r\nb\rc\n") == "a\nb\nc\n"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("- item one\n• item two", "* item one\n* item two"),
        ("  ▪ alpha", "* alpha"),
        ("— em dash", "* em dash"),
        ("– en dash", "* en dash"),
        ("o option", "* option"),
        ("â€¢ mojibake", "* mojibake"),
        ("a\n\n- b", "a\n* b"),
    ],
)
def test_normalize_bullets_rewrites_line_leading_markers(raw: str, expected: str) -> None:
    """Bullet glyphs, dashes and `o` markers at line start should become `* `."""

    assert NormalizeBullets().apply(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["open door", "Oval", "text - not a bullet", "*already"],
)
def test_normalize_bullets_keeps_non_markers(raw: str) -> None:
    """Words starting with `o` and mid-line dashes should stay unchanged."""

    assert NormalizeBullets().apply(raw) == raw


def test_letter_o_marker_requires_following_whitespace() -> None:
    """A bare `o` prefix would rewrite ordinary words; only `o` plus whitespace is a marker."""

    optional_space_marker = re.compile(r"^\s*o\s*", re.MULTILINE)
    stage = NormalizeBullets()

    assert optional_space_marker.sub("* ", "open door\noval") == "* pen door\n* val"
    assert stage.apply("open door\noval") == "open door\noval"
    assert stage.apply("o item\n  o\tnext") == "* item\n* next"


def test_normalize_bullets_treats_cr_and_line_separators_as_line_starts() -> None:
    """Markers after CR, LS or PS should be recognized like markers after LF."""

    stage = NormalizeBullets()

    assert stage.apply("a\r- b") == "a\r* b"
    assert stage.apply("a\u2028\u2022 b") == "a\u2028* b"
    assert stage.apply("a\u2029o b") == "a\u2029* b"


def test_collapse_horizontal_whitespace_keeps_line_breaks() -> None:
    """Spaces and tabs should collapse while newlines survive."""

    assert CollapseHorizontalWhitespace().apply("a  \t b\n\n  c") == "a b\n\n c"


def test_trim_lines_and_drop_empty_lines() -> None:
    """Line trimming and empty-line removal should work per LF-separated line."""

    assert TrimLines().apply("  a  \n\tb\t\n") == "a\nb\n"
    assert DropEmptyLines().apply("a\n\n   \nb\n") == "a\nb"
    assert DropEmptyLines().apply("") == ""


def test_strip_special_characters_keeps_ascii_word_characters_and_whitespace() -> None:
    """Special-character stripping should drop bullets, punctuation and non-ASCII letters."""

    stage = StripSpecialCharacters()

    assert stage.apply("* Hello, world! café_1") == " Hello world caf_1"
    assert stage.apply("a\u00a0b\tc") == "a\u00a0b\tc"


def test_stages_are_stateless() -> None:
    """Applying a shared stage instance repeatedly should be deterministic."""

    for stage in DEFAULT_STAGES:
        sample = "  - “Quote” <i>x</i> mail@example.com , end\r\n"
        assert stage.apply(sample) == stage.apply(sample)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("a\x1cb", "ab"),
        ("a\x85b", "ab"),
        ("a\ufeffb", "a\ufeffb"),
        ("a\u00a0\u3000b", "a\u00a0\u3000b"),
    ],
)
def test_strip_special_characters_uses_browser_whitespace_set(
    raw: str, expected: str
) -> None:
    """Separator controls are special characters; BOM and wide spaces are whitespace."""

    assert StripSpecialCharacters().apply(raw) == expected


def test_fix_punctuation_spacing_collapses_browser_whitespace_only() -> None:
    """BOM and no-break spaces collapse while information separators are kept."""

    stage = FixPunctuationSpacing()

    assert stage.apply("a\ufeff\u00a0b") == "a b"
    assert stage.apply("a\x1cb") == "a\x1cb"
    assert stage.apply("a\ufeff.") == "a. "


def test_trim_lines_uses_browser_whitespace_set() -> None:
    """Line trimming should strip BOM but keep separator controls."""

    assert TrimLines().apply("\ufeffa\u3000\n\x1fb\x1f") == "a\n\x1fb\x1f"
