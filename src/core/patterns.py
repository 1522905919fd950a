"""Compile filter-pattern text into a tree of Pattern nodes.

Directive syntax, one per line:
- `!` prefix turns the directive into an allow rule (negation).
- `$react <pattern>` matches the "reacted by" name instead of the post text.
- `/body/flags` is a regular expression; anything else is a literal word.

Lines that cannot be compiled (bad regex body or flags, or nothing left to
match after a prefix) are dropped silently, so a broken line never hides or
shows anything.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, List, Optional, Tuple, Union

import regex

from core.block_parser import Block, parse_indented_lines_into_blocks
from core.comments import strip_comments
from core.literal_words import regex_from_literal_word

LOGGER = logging.getLogger(__name__)

ALLOW_PREFIX = "!"
REACT_PREFIX = regex.compile(r"\$react\s+")
REGEX_LITERAL = regex.compile(r"/(.+)/([a-z]*)")

# Letters accepted after the closing slash. Unicode is always on for str
# patterns; v also enables set operations such as [\w--\d]. g, y and d do not
# change a yes/no search.
_FLAG_BITS = {
    "i": regex.IGNORECASE,
    "m": regex.MULTILINE,
    "s": regex.DOTALL,
    "u": 0,
    "v": regex.VERSION1,
    "g": 0,
    "y": 0,
    "d": 0,
}


@dataclass(frozen=True)
class RegexPattern:
    """Matches against the entry's normalized display text."""

    matcher: regex.Pattern
    source_text: str


@dataclass(frozen=True)
class ReactedByNamePattern:
    """Matches against the name of whoever reacted to the entry."""

    matcher: regex.Pattern
    source_text: str


@dataclass(frozen=True)
class AllowPattern:
    """Negation wrapper: a match of `inner` explicitly keeps the entry."""

    inner: Union[RegexPattern, ReactedByNamePattern]


@dataclass(frozen=True)
class BlockPattern:
    """Ordered children; the first decisive child wins."""

    children: Tuple["Pattern", ...] = ()


Pattern = Union[RegexPattern, ReactedByNamePattern, AllowPattern, BlockPattern]


class InvalidDirective(ValueError):
    """Raised internally when a directive cannot be compiled."""


def _translate_flags(flags: str) -> int:
    if len(set(flags)) != len(flags):
        raise InvalidDirective(f"repeated regex flag in {flags!r}")
    if "u" in flags and "v" in flags:
        raise InvalidDirective("regex flags u and v are mutually exclusive")
    bits = 0
    for flag in flags:
        if flag not in _FLAG_BITS:
            raise InvalidDirective(f"unsupported regex flag {flag!r}")
        bits |= _FLAG_BITS[flag]
    return bits


def _compile_matcher(text: str) -> regex.Pattern:
    literal = REGEX_LITERAL.fullmatch(text)
    if literal is None:
        if not text:
            raise InvalidDirective("empty directive")
        return regex_from_literal_word(text)

    body, flags = literal.groups()
    bits = _translate_flags(flags)
    try:
        return regex.compile(body, bits)
    except regex.error as exc:
        raise InvalidDirective(f"invalid regex: {exc}") from exc


def compile_directive(line: str) -> Union[RegexPattern, ReactedByNamePattern, AllowPattern]:
    """Compile one trimmed, comment-free line into a pattern node.

    Raises InvalidDirective when the line contributes nothing.
    """

    text = line
    allow = text.startswith(ALLOW_PREFIX)
    if allow:
        text = text[len(ALLOW_PREFIX):]

    react = REACT_PREFIX.match(text)
    if react:
        text = text[react.end():]

    matcher = _compile_matcher(text)
    node: Union[RegexPattern, ReactedByNamePattern]
    if react:
        node = ReactedByNamePattern(matcher=matcher, source_text=text)
    else:
        node = RegexPattern(matcher=matcher, source_text=text)
    if allow:
        return AllowPattern(inner=node)
    return node


def _try_compile(line: str) -> Optional[Pattern]:
    try:
        return compile_directive(line)
    except InvalidDirective as exc:
        LOGGER.debug("Ignoring directive %r: %s", line, exc)
        return None


def compile_blocks(blocks: Iterable[Block]) -> BlockPattern:
    """Compile a block forest; the result is always a BlockPattern.

    Each block contributes its own directive followed by a nested block of
    its children, so evaluation order equals document order.
    """

    children: List[Pattern] = []
    for block in blocks:
        node = _try_compile(block.line)
        if node is not None:
            children.append(node)
        if block.children:
            children.append(compile_blocks(block.children))
    return BlockPattern(children=tuple(children))


def _directive_lines(text: str) -> List[str]:
    lines = [strip_comments(line) for line in text.splitlines()]
    return [line for line in lines if line.strip()]


def compile_pattern_text(text: str) -> BlockPattern:
    """Compile a whole filter-pattern document."""

    return compile_blocks(parse_indented_lines_into_blocks(_directive_lines(text)))


def directive_errors(text: str) -> List[Tuple[str, str]]:
    """Return `(directive, reason)` for each line of `text` that compiles to nothing."""

    errors: List[Tuple[str, str]] = []
    for line in _directive_lines(text):
        directive = line.strip()
        try:
            compile_directive(directive)
        except InvalidDirective as exc:
            errors.append((directive, str(exc)))
    return errors


def find_invalid_directives(text: str) -> List[str]:
    """Return the directives of `text` that compile to nothing, in order."""

    return [directive for directive, _ in directive_errors(text)]
