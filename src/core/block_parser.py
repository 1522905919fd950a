"""Indentation-based block parsing (Python-style nesting)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class Block:
    """One non-blank line of pattern text and the lines nested under it."""

    line: str
    children: List["Block"] = field(default_factory=list)


def _indent_width(line: str) -> int:
    # Tabs and spaces count as one column each.
    return len(line) - len(line.lstrip())


def parse_indented_lines_into_blocks(lines: Iterable[str]) -> List[Block]:
    """Build a forest of blocks where deeper indentation means "child of".

    Any strictly greater indentation opens a child, so uneven steps such as
    2 then 5 spaces still nest. Blank lines are skipped.
    """

    roots: List[Block] = []
    stack: List[Tuple[Block, int]] = []

    for raw_line in lines:
        text = raw_line.strip()
        if not text:
            continue
        indent = _indent_width(raw_line)
        block = Block(line=text)

        while stack and stack[-1][1] >= indent:
            stack.pop()

        if stack:
            stack[-1][0].children.append(block)
        else:
            roots.append(block)
        stack.append((block, indent))

    return roots
