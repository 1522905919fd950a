"""Plain-text entry used by the CLI checker and the config panel tester."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TextEntry:
    """SocialMediaEntry built from literal values instead of a page."""

    text: str
    reacted_by_name: Optional[str] = None
    suggested: bool = False
    content_credentials: bool = False

    def get_text(self) -> str:
        return self.text

    def get_reacted_by_name(self) -> Optional[str]:
        return self.reacted_by_name

    def is_suggested(self) -> bool:
        return self.suggested

    def contains_content_credentials(self) -> bool:
        return self.content_credentials
