"""Evaluate compiled patterns against a single feed entry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.patterns import (
    AllowPattern,
    BlockPattern,
    Pattern,
    ReactedByNamePattern,
    RegexPattern,
)
from core.ports import SocialMediaEntry

_QUOTE_TABLE = str.maketrans(
    {
        "\u2018": "'",
        "\u2019": "'",
        "\u201c": '"',
        "\u201d": '"',
    }
)


class Outcome(Enum):
    MATCH = "match"
    UNMATCH = "unmatch"
    INCONCLUSIVE = "inconclusive"


@dataclass(frozen=True)
class EvalResult:
    """Ternary verdict; only decisive results carry a reason."""

    outcome: Outcome
    reason: Optional[str] = None

    @classmethod
    def match(cls, reason: str) -> "EvalResult":
        return cls(Outcome.MATCH, reason)

    @classmethod
    def unmatch(cls, reason: Optional[str]) -> "EvalResult":
        return cls(Outcome.UNMATCH, reason)

    @property
    def decisive(self) -> bool:
        return self.outcome is not Outcome.INCONCLUSIVE

    def negated(self) -> "EvalResult":
        if self.outcome is Outcome.MATCH:
            return EvalResult(Outcome.UNMATCH, self.reason)
        if self.outcome is Outcome.UNMATCH:
            return EvalResult(Outcome.MATCH, self.reason)
        return self


INCONCLUSIVE = EvalResult(Outcome.INCONCLUSIVE)


def normalize_text(text: str) -> str:
    """Fold curly quotes to their ASCII forms."""

    return text.translate(_QUOTE_TABLE)


def evaluate(pattern: Pattern, entry: SocialMediaEntry) -> EvalResult:
    """Evaluate `pattern` against `entry`.

    Block children are tried in order and the first decisive result wins.
    Allow wrappers swap Match and Unmatch and pass Inconclusive through.
    """

    if isinstance(pattern, RegexPattern):
        text = normalize_text(entry.get_text())
        if pattern.matcher.search(text):
            return EvalResult.match(f"Matches pattern: {pattern.source_text}")
        return INCONCLUSIVE

    if isinstance(pattern, ReactedByNamePattern):
        name = entry.get_reacted_by_name()
        if name is None:
            return INCONCLUSIVE
        if pattern.matcher.search(name):
            return EvalResult.match(f"Reacted by user: {pattern.source_text}")
        return INCONCLUSIVE

    if isinstance(pattern, AllowPattern):
        return evaluate(pattern.inner, entry).negated()

    if isinstance(pattern, BlockPattern):
        for child in pattern.children:
            result = evaluate(child, entry)
            if result.decisive:
                return result
        return INCONCLUSIVE

    raise AssertionError(f"Unknown pattern node: {pattern!r}")
