"""Ports (interfaces) used by the core.

Ports define the minimal contracts for feed entries and settings storage so
that the core can be reused with different page scrapers and backends.
"""

from __future__ import annotations

from typing import Optional, Protocol

from core.models import Settings


class SocialMediaEntry(Protocol):
    """Read-only view of one feed item, as seen by the pattern evaluator."""

    def get_text(self) -> str:
        ...

    def get_reacted_by_name(self) -> Optional[str]:
        ...

    def is_suggested(self) -> bool:
        ...

    def contains_content_credentials(self) -> bool:
        ...


class FeedEntry(SocialMediaEntry, Protocol):
    """Entry that the host page can also act on."""

    def hide(self) -> None:
        ...

    def highlight(self, reason: Optional[str]) -> None:
        ...

    def is_filtered(self) -> bool:
        ...


class SettingsStorePort(Protocol):
    """Settings persistence required by the app and the config panel."""

    def load(self) -> Settings:
        ...

    def save(self, settings: Settings) -> None:
        ...
