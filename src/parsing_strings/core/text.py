"""Whitespace and literal-comparison helpers."""

from __future__ import annotations

# Characters a numeric literal may be padded with.
NUMBER_WHITESPACE = " \t\n\v\f\r"

# Control whitespace plus the Unicode space, line and paragraph separators.
# Unlike str.isspace(), the \x1c-\x1f information separators are not included.
WHITE_SPACE = (
    "\t\n\v\f\r\x85 \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def strip_number_whitespace(text: str) -> str:
    return text.strip(NUMBER_WHITESPACE)


def is_blank(text: str) -> bool:
    """True for empty or whitespace-only text."""
    return not text.strip(WHITE_SPACE)


def is_trimmed_literal(text: str, literal: str) -> bool:
    """True when ``text`` equals ``literal`` once surrounding whitespace is removed."""
    return text.strip(WHITE_SPACE) == literal


def equals_ignore_case(text: str, literal: str) -> bool:
    return len(text) == len(literal) and text.lower() == literal.lower()
