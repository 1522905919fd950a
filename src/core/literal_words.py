"""Compile literal word directives into regular expressions."""

from __future__ import annotations

import regex

_WORD_CHAR = regex.compile(r"\w")
_LINE_BREAKS = frozenset("\n\r\v\f\x1c\x1d\x1e\x85\u2028\u2029")


def _escape_char(char: str) -> str:
    if char in _LINE_BREAKS:
        return f"\\u{ord(char):04x}"
    return regex.escape(char)


def literal_word_expression(word: str) -> str:
    """Return the regex source that matches `word` literally.

    A word boundary is required only on the sides where `word` begins or ends
    with a word character, so `#hashtag` and `hello!` still match inside
    surrounding punctuation. Word characters are unicode-aware. Line breaks are
    written as `\\uXXXX` escapes so the expression stays on one line.
    """

    expression = "".join(_escape_char(char) for char in word)
    if word and _WORD_CHAR.match(word[0]):
        expression = r"\b" + expression
    if word and _WORD_CHAR.match(word[-1]):
        expression = expression + r"\b"
    return expression


def regex_from_literal_word(word: str) -> regex.Pattern:
    """Return a case-insensitive pattern that matches `word` literally."""

    return regex.compile(literal_word_expression(word), regex.IGNORECASE)
