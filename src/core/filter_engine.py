"""Filtering decisions for feed entries.

The engine folds the pattern verdict together with the boolean settings
flags. Flags are only consulted when the patterns have no opinion, so an
explicit allow rule always wins over "hide suggested" and friends.
"""

from __future__ import annotations

import logging
from typing import Optional

from core.evaluator import Outcome, evaluate
from core.models import NO_DECISION, Decision, DecisionKind, Settings
from core.patterns import BlockPattern, compile_pattern_text
from core.ports import SocialMediaEntry

LOGGER = logging.getLogger(__name__)

CONTENT_CREDENTIALS_REASON = "Post contains content credentials"
SUGGESTED_REASON = "Post is suggested"


class CompiledPatternCache:
    """Compiled pattern tree keyed by the raw filter-pattern text."""

    def __init__(self) -> None:
        self._source: Optional[str] = None
        self._compiled: Optional[BlockPattern] = None

    def get(self, source: str) -> BlockPattern:
        if self._compiled is None or source != self._source:
            LOGGER.debug("Compiling filter patterns (%s chars)", len(source))
            self._compiled = compile_pattern_text(source)
            self._source = source
        return self._compiled


class FilterEngine:
    """Decides show / hide / nothing for entries under one settings snapshot."""

    def __init__(self, settings: Settings, cache: Optional[CompiledPatternCache] = None) -> None:
        self._settings = settings
        self._cache = cache or CompiledPatternCache()

    @property
    def settings(self) -> Settings:
        return self._settings

    def update_settings(self, settings: Settings) -> None:
        """Swap the settings snapshot; patterns recompile lazily if changed."""

        self._settings = settings

    @property
    def root_pattern(self) -> BlockPattern:
        return self._cache.get(self._settings.filter_patterns)

    def decide(self, entry: SocialMediaEntry) -> Decision:
        result = evaluate(self.root_pattern, entry)
        if result.outcome is Outcome.MATCH:
            return Decision(DecisionKind.HIDE, result.reason)
        if result.outcome is Outcome.UNMATCH:
            return Decision(DecisionKind.SHOW, result.reason)

        if self._settings.hide_content_credentials and entry.contains_content_credentials():
            return Decision(DecisionKind.HIDE, CONTENT_CREDENTIALS_REASON)
        if self._settings.hide_suggested and entry.is_suggested():
            return Decision(DecisionKind.HIDE, SUGGESTED_REASON)
        return NO_DECISION

    def should_hide(self, entry: SocialMediaEntry) -> bool:
        return self.decide(entry).hidden
