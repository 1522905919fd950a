"""JSON file settings adapter.

Implements the core SettingsStorePort with a single JSON document on disk.
Older records are migrated on load and written back in the current shape on
the next save.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from core.models import Settings
from core.settings_migrations import (
    SettingsError,
    settings_from_record,
    settings_to_record,
)

LOGGER = logging.getLogger(__name__)


class JsonSettingsStore:
    """Thin JSON wrapper that satisfies the SettingsStorePort contract."""

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Settings:
        """Return stored settings, or defaults when nothing was saved yet."""

        if not self._path.exists():
            LOGGER.info("No settings at %s, using defaults", self._path)
            return Settings()

        try:
            record = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise SettingsError(f"{self._path.name} error: {exc.msg}") from exc
        if not isinstance(record, dict):
            raise SettingsError("settings root must be an object")
        return settings_from_record(record)

    def save(self, settings: Settings) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(settings_to_record(settings), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        LOGGER.info("Settings saved to %s", self._path)
