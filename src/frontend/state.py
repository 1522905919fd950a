"""State container for settings loading and dirty tracking."""

from __future__ import annotations

from dataclasses import dataclass

from core.models import Settings


@dataclass
class ConfigState:
    settings: Settings | None = None
    dirty: bool = False
    error: str | None = None
