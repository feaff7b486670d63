"""Whitespace rules shared by stages, options and counters.

Python's Unicode `\\s` and `str.strip()` disagree with the browser on a few
code points: they treat `\\x1c`-`\\x1f` and `\\x85` as whitespace and do not
treat `\\ufeff` as whitespace. Everything that splits, trims or matches
whitespace goes through the set defined here so results agree with the
browser-side counters.
"""

from __future__ import annotations

import re

WHITESPACE_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Regex fragments for embedding in larger patterns.
WHITESPACE_BODY = re.escape(WHITESPACE_CHARS)
WHITESPACE = f"[{WHITESPACE_BODY}]"
NON_WHITESPACE = f"[^{WHITESPACE_BODY}]"

# With `re.MULTILINE`, `^` only follows LF; browser line starts also follow CR, LS and PS.
LINE_START = r"(?:^|(?<=[\r\u2028\u2029]))"

_WHITESPACE_RUN_RE = re.compile(f"{WHITESPACE}+")


def strip_whitespace(text: str) -> str:
    """Trim leading and trailing whitespace."""

    return text.strip(WHITESPACE_CHARS)


def split_words(text: str) -> list[str]:
    """Split on whitespace runs, dropping empty pieces."""

    return [piece for piece in _WHITESPACE_RUN_RE.split(text) if piece]


def collapse_whitespace(text: str) -> str:
    """Replace every whitespace run with a single space."""

    return _WHITESPACE_RUN_RE.sub(" ", text)
