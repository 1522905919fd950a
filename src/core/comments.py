r"""End-of-line comment stripping for filter-pattern text.

A `;` starts a comment unless it is escaped as `\;` or sits inside the
`/.../` span of a line that begins with a regex literal.
"""

from __future__ import annotations

from typing import Optional

COMMENT_CHAR = ";"
ESCAPE_CHAR = "\\"
REGEX_DELIMITER = "/"


def _find_regex_end(line: str, start: int) -> Optional[int]:
    """Return the index of the closing `/` of a leading regex literal."""

    if not line.startswith(REGEX_DELIMITER, start):
        return None
    for index in range(start + 1, len(line)):
        if line[index] == REGEX_DELIMITER and line[index - 1] != ESCAPE_CHAR:
            return index
    return None


def strip_comments(line: str) -> str:
    """Remove a trailing `; comment` from one raw line of pattern text.

    Whitespace before the comment is kept; callers trim. Escaped semicolons
    collapse to a literal `;`. Leading indentation is skipped when looking for
    a regex literal so nested directives behave like top-level ones.
    """

    content_start = len(line) - len(line.lstrip())
    regex_end = _find_regex_end(line, content_start)

    escapes: list[int] = []
    result = line
    for index, char in enumerate(line):
        if char != COMMENT_CHAR:
            continue
        if regex_end is not None and index < regex_end:
            continue
        if index > 0 and line[index - 1] == ESCAPE_CHAR:
            escapes.append(index - 1)
            continue
        result = line[:index]
        break

    if escapes:
        skip = set(escapes)
        result = "".join(char for index, char in enumerate(result) if index not in skip)
    return result


def escape_comments(line: str) -> str:
    """Escape every `;` that strip_comments would treat as a comment start.

    strip_comments(escape_comments(line)) gives back `line` unchanged.
    """

    content_start = len(line) - len(line.lstrip())
    regex_end = _find_regex_end(line, content_start)

    parts: list[str] = []
    for index, char in enumerate(line):
        if char == COMMENT_CHAR and (regex_end is None or index > regex_end):
            parts.append(ESCAPE_CHAR)
        parts.append(char)
    return "".join(parts)
