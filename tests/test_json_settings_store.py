from __future__ import annotations

import json

import pytest

from adapters.json_settings_store import JsonSettingsStore
from core.models import Settings
from core.settings_migrations import SettingsError, UnknownSettingsVersionError


def test_missing_file_loads_defaults(tmp_path) -> None:
    store = JsonSettingsStore(tmp_path / "settings.json")

    assert store.load() == Settings()


def test_save_then_load(tmp_path) -> None:
    store = JsonSettingsStore(tmp_path / "nested" / "settings.json")
    settings = Settings(filter_patterns="spam ; comment", hide_content_credentials=True)

    store.save(settings)

    assert store.load() == settings
    saved = json.loads(store.path.read_text(encoding="utf-8"))
    assert saved["version"] == 1


def test_legacy_file_is_migrated(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"regexList": ["spam"], "debugMode": False}), encoding="utf-8")

    assert JsonSettingsStore(path).load() == Settings(filter_patterns="spam")


def test_future_version_raises(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"version": 7}), encoding="utf-8")

    with pytest.raises(UnknownSettingsVersionError):
        JsonSettingsStore(path).load()


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_malformed_file_raises_settings_error(tmp_path, content: str) -> None:
    path = tmp_path / "settings.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(SettingsError):
        JsonSettingsStore(path).load()
