"""Core filtering pass over the entries of a feed page.

This module is integration-agnostic. It only relies on the FeedEntry port,
enabling other page scrapers or frontends without changes here.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, Optional

from core.config import HostConfig
from core.filter_engine import FilterEngine
from core.models import DecisionKind
from core.ports import FeedEntry

LOGGER = logging.getLogger(__name__)


def should_filter_url(url: Optional[str], config: HostConfig) -> bool:
    """Return False for pages the filter must not touch."""

    if not url:
        return True
    return not any(fragment in url for fragment in config.skip_url_fragments)


@dataclass
class FilterSummary:
    """Counts for one filtering pass."""

    hidden: int = 0
    highlighted: int = 0
    shown: int = 0
    untouched: int = 0

    @property
    def acted_on(self) -> int:
        return self.hidden + self.highlighted


class FeedProcessor:
    """Applies engine decisions to feed entries: remove, or highlight in highlight mode."""

    def __init__(self, engine: FilterEngine, highlight_mode: Optional[bool] = None) -> None:
        self._engine = engine
        if highlight_mode is None:
            highlight_mode = engine.settings.highlight_mode
        self._highlight_mode = highlight_mode

    def process(self, entries: Iterable[FeedEntry]) -> FilterSummary:
        """Run one pass. Each entry is decided independently."""

        summary = FilterSummary()
        for entry in entries:
            decision = self._engine.decide(entry)
            if decision.kind is DecisionKind.SHOW:
                summary.shown += 1
                continue
            if decision.kind is DecisionKind.NOTHING:
                summary.untouched += 1
                continue

            if self._highlight_mode:
                # Entries stay in the page, so a later pass sees them again.
                if entry.is_filtered():
                    continue
                entry.highlight(decision.reason)
                summary.highlighted += 1
            else:
                entry.hide()
                summary.hidden += 1
            LOGGER.debug("Filtered entry: %s", decision.reason)

        if summary.acted_on:
            action = "Highlighted" if self._highlight_mode else "Removed"
            LOGGER.info("%s %s element(s)", action, summary.acted_on)
        return summary
