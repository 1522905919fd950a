"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any integration-specific types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """Snapshot of the user's filter settings for one filtering pass."""

    filter_patterns: str = ""
    hide_suggested: bool = False
    hide_content_credentials: bool = False
    # Display-only; never consulted when deciding.
    highlight_mode: bool = False


class DecisionKind(Enum):
    SHOW = "show"
    HIDE = "hide"
    NOTHING = "nothing"


@dataclass(frozen=True)
class Decision:
    """Final verdict for one entry, with a human-readable reason."""

    kind: DecisionKind
    reason: Optional[str] = None

    @property
    def hidden(self) -> bool:
        return self.kind is DecisionKind.HIDE

    @property
    def shown(self) -> bool:
        return self.kind is DecisionKind.SHOW


NO_DECISION = Decision(DecisionKind.NOTHING)
