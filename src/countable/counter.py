from __future__ import annotations

import re
from typing import Any, Mapping

from .codepoints import count_code_points
from .config import CountConfig, resolve_config
from .models import CountResult

# Whitespace used for trimming and splitting. Unlike str.isspace() this excludes
# \x1c-\x1f and \x85 and includes the U+FEFF byte order mark.
WHITESPACE = (
    "\t\n\x0b\x0c\r \xa0\u1680"
    + "".join(chr(value) for value in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

WHITESPACE_RE = re.compile(f"[{WHITESPACE}]")
NON_WHITESPACE_RUN_RE = re.compile(f"[^{WHITESPACE}]+")
TAG_RE = re.compile(r"</?[A-Za-z][^>]*>")
PUNCTUATION_RE = re.compile(r"['\";:,.?¿\-!¡]+")
LINE_TERMINATOR_RE = re.compile(r"[\n\r]")
# A line break is CRLF, a lone CR or a lone LF.
SOFT_BREAK_RE = re.compile(r"(?:\r\n|\r|\n)+")
HARD_BREAK_RE = re.compile(r"(?:\r\n|\r|\n){2,}")


def count(text: Any, config: CountConfig | Mapping[Any, Any] | None = None) -> CountResult:
    """Count paragraphs, words, characters and characters plus spaces in text."""
    options = resolve_config(config)
    original = _as_text(text)
    if options.strip_tags:
        original = strip_tags(original)
    trimmed = original.strip(WHITESPACE)

    return CountResult(
        paragraphs=count_paragraphs(trimmed, hard_returns=options.hard_returns),
        words=count_words(trimmed),
        characters=count_characters(trimmed),
        characters_and_spaces=count_characters_and_spaces(original),
    )


def strip_tags(text: str) -> str:
    """Best-effort removal of markup tags; not an HTML parser."""
    return TAG_RE.sub("", text)


def count_paragraphs(trimmed: str, *, hard_returns: bool = False) -> int:
    if not trimmed:
        return 0
    pattern = HARD_BREAK_RE if hard_returns else SOFT_BREAK_RE
    return len(pattern.findall(trimmed)) + 1


def count_words(trimmed: str) -> int:
    if not trimmed:
        return 0
    return len(NON_WHITESPACE_RUN_RE.findall(PUNCTUATION_RE.sub("", trimmed)))


def count_characters(trimmed: str) -> int:
    if not trimmed:
        return 0
    return count_code_points(WHITESPACE_RE.sub("", trimmed))


def count_characters_and_spaces(original: str) -> int:
    """Count code points of the untrimmed text, ignoring only line terminators."""
    return count_code_points(LINE_TERMINATOR_RE.sub("", original))


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)
