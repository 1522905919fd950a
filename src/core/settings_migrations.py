"""Versioned settings records and their migrations.

Stored records carry a `version` key. Each migration is a pure function that
turns a version N record into a version N+1 record; loading runs the chain up
to CURRENT_SETTINGS_VERSION. Records from a newer release fail fast instead
of being half-read.

Version 0 is the unversioned record of the first release:
    {"regexList": ["pattern", ...], "debugMode": false}
Version 1:
    {"version": 1, "filter_patterns": "...", "hide_suggested": false,
     "hide_content_credentials": false, "highlight_mode": false}
"""

from __future__ import annotations

from typing import Any, Callable, Dict

import regex

from core.comments import escape_comments
from core.literal_words import literal_word_expression
from core.models import Settings
from core.patterns import ALLOW_PREFIX, REACT_PREFIX, REGEX_LITERAL

CURRENT_SETTINGS_VERSION = 1

Record = Dict[str, Any]


class SettingsError(ValueError):
    """The stored settings could not be read."""


class UnknownSettingsVersionError(SettingsError):
    """The stored settings were written by an unknown (usually newer) release."""

    def __init__(self, version: Any) -> None:
        super().__init__(f"Unknown settings version: {version!r}")
        self.version = version


LEGACY_REGEX_LITERAL = regex.compile(r"/(.+)/([gimuy]*)")


def _is_single_line(item: str) -> bool:
    return item.splitlines() == [item]


def _is_plain_literal(item: str) -> bool:
    # True when the current grammar reads `item` as the same literal word.
    return (
        _is_single_line(item)
        and item == item.strip()
        and not item.startswith(ALLOW_PREFIX)
        and REACT_PREFIX.match(item) is None
        and REGEX_LITERAL.fullmatch(item) is None
    )


def legacy_item_to_directive(item: str) -> str:
    """Rewrite one first-release pattern as a line with the same meaning.

    First-release items had no comments, allow rules or `$react` scoping:
    each was a `/regex/flags` or a literal word.
    """

    if _is_single_line(item) and LEGACY_REGEX_LITERAL.fullmatch(item):
        return escape_comments(item)
    if _is_plain_literal(item):
        return escape_comments(item)
    return escape_comments(f"/{literal_word_expression(item)}/i")


def _v0_to_v1(record: Record) -> Record:
    items = [str(item) for item in record.get("regexList") or []]
    return {
        "version": 1,
        "filter_patterns": "\n".join(legacy_item_to_directive(item) for item in items if item),
        "hide_suggested": False,
        "hide_content_credentials": False,
        "highlight_mode": bool(record.get("debugMode", False)),
    }


MIGRATIONS: Dict[int, Callable[[Record], Record]] = {
    0: _v0_to_v1,
}


def record_version(record: Record) -> int:
    version = record.get("version", 0)
    # bool is an int subclass; reject it explicitly.
    if isinstance(version, bool) or not isinstance(version, int):
        raise UnknownSettingsVersionError(version)
    if version < 0 or version > CURRENT_SETTINGS_VERSION:
        raise UnknownSettingsVersionError(version)
    return version


def migrate_settings_record(record: Record) -> Record:
    """Upgrade a stored record to the current version."""

    version = record_version(record)
    while version < CURRENT_SETTINGS_VERSION:
        record = MIGRATIONS[version](record)
        version = record_version(record)
    return record


def settings_from_record(record: Record) -> Settings:
    """Build Settings from a record of any known version."""

    current = migrate_settings_record(record)
    defaults = Settings()
    patterns = current.get("filter_patterns", defaults.filter_patterns)
    if not isinstance(patterns, str):
        raise SettingsError("filter_patterns must be a string")
    return Settings(
        filter_patterns=patterns,
        hide_suggested=bool(current.get("hide_suggested", defaults.hide_suggested)),
        hide_content_credentials=bool(
            current.get("hide_content_credentials", defaults.hide_content_credentials)
        ),
        highlight_mode=bool(current.get("highlight_mode", defaults.highlight_mode)),
    )


def settings_to_record(settings: Settings) -> Record:
    return {
        "version": CURRENT_SETTINGS_VERSION,
        "filter_patterns": settings.filter_patterns,
        "hide_suggested": settings.hide_suggested,
        "hide_content_credentials": settings.hide_content_credentials,
        "highlight_mode": settings.highlight_mode,
    }
