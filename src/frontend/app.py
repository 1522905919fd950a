"""Main Textual app for the nospam settings editor."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Center, Container, Horizontal, Vertical
from textual.widgets import Button, ContentSwitcher, Footer, Static, Tab, Tabs

import settings
from adapters.json_settings_store import JsonSettingsStore
from core.ports import SettingsStorePort
from core.settings_migrations import SettingsError, UnknownSettingsVersionError
from .constants import LINKEDIN_BLUE
from .modals import ReloadConfirmScreen, UnsavedChangesScreen
from .state import ConfigState
from .tabs.guide import GuideTab
from .tabs.options import OptionsTab
from .tabs.patterns import PatternsTab


class ConfigPanelApp(App):
    """Settings editor with global settings state and tabs."""

    def __init__(self, store: SettingsStorePort | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.settings_store = store or JsonSettingsStore(settings.SETTINGS_PATH)
        self.config_state = ConfigState()

    BINDINGS = [
        ("ctrl+s", "save_config", "Save"),
        ("ctrl+r", "reload_config", "Reload"),
        ("q", "request_quit", "Quit"),
        ("ctrl+c", "request_quit", "Quit"),
    ]

    CSS_PATH = "app.tcss"

    def compose(self) -> ComposeResult:
        with Container(id="header"):
            with Horizontal(id="header-row"):
                with Vertical(id="header-left"):
                    yield Static(self._title_text(), id="title")
                    yield Static("LinkedIn post filter", classes="subtle")
                with Vertical(id="header-right"):
                    yield Static(f"file: {self._store_label()}", classes="subtle")
                    yield Static("", id="header-status")
                    yield Horizontal(
                        Button("Save", id="save-btn"),
                        Button("Reload", id="reload-btn"),
                        id="header-actions",
                    )

        with Container(id="tabs-bar"):
            with Center(id="tabs-center"):
                yield Tabs(
                    Tab("Patterns", id="patterns"),
                    Tab("Options", id="options"),
                    Tab("Guide", id="guide"),
                    id="tabs",
                )

        with ContentSwitcher(id="content"):
            yield PatternsTab(id="patterns")
            yield OptionsTab(id="options")
            yield GuideTab(id="guide")
        yield Footer()

    def on_mount(self) -> None:
        self._load_config()
        self._set_active_tab("patterns")

    def on_tabs_tab_activated(self, event: Tabs.TabActivated) -> None:
        tab_id = event.tab.id or ""
        if not tab_id:
            label = event.tab.label
            if hasattr(label, "plain"):
                label = label.plain
            tab_id = str(label).strip().lower()
        self._set_active_tab(tab_id)

    def _set_active_tab(self, tab_id: str) -> None:
        switcher = self.query_one("#content", ContentSwitcher)
        switcher.current = tab_id

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save-btn":
            self.action_save_config()
        elif event.button.id == "reload-btn":
            self.action_reload_config()

    def action_save_config(self) -> None:
        self._save_config()

    def action_reload_config(self) -> None:
        if self.config_state.dirty:
            self.push_screen(ReloadConfirmScreen(self._store_label()), self._handle_reload_choice)
        else:
            self._load_config()

    def action_request_quit(self) -> None:
        if self.config_state.dirty:
            screen = UnsavedChangesScreen(self.config_state.settings, self._store_label())
            self.push_screen(screen, self._handle_exit_choice)
        else:
            self.exit()

    def _handle_exit_choice(self, choice: str | None) -> None:
        if choice == "save":
            if self._save_config():
                self.exit()
        elif choice == "discard":
            self.exit()

    def _handle_reload_choice(self, choice: str | None) -> None:
        if choice == "save":
            if self._save_config():
                self._load_config()
        elif choice == "reload":
            self._load_config()

    def _load_config(self) -> None:
        try:
            self.config_state.settings = self.settings_store.load()
            self.config_state.error = None
        except UnknownSettingsVersionError as exc:
            self.config_state.settings = None
            self.config_state.error = (
                f"{exc}: written by a newer nospam, please upgrade"
            )
        except SettingsError as exc:
            self.config_state.settings = None
            self.config_state.error = str(exc)
        except OSError as exc:
            self.config_state.settings = None
            self.config_state.error = f"load failed: {exc.strerror or exc}"
        self.config_state.dirty = False
        self._refresh_header()
        self._refresh_tabs()

    def _save_config(self) -> bool:
        if self.config_state.settings is None:
            self.config_state.error = "Nothing to save"
            self._refresh_header()
            return False
        try:
            self.settings_store.save(self.config_state.settings)
        except OSError as exc:
            self.config_state.error = f"save failed: {exc.strerror or exc}"
            self._refresh_header()
            return False
        self.config_state.dirty = False
        self.config_state.error = None
        self._refresh_header()
        return True

    def mark_dirty(self) -> None:
        self.config_state.dirty = True
        self._refresh_header()

    def update_filter_settings(self, **changes: Any) -> None:
        """Update the in-memory settings snapshot and mark dirty."""
        if self.config_state.settings is None:
            return
        self.config_state.settings = replace(self.config_state.settings, **changes)
        self.mark_dirty()

    def _refresh_header(self) -> None:
        status = self.query_one("#header-status", Static)
        save_btn = self.query_one("#save-btn", Button)

        status.remove_class("status-loaded", "status-modified", "status-error")
        if self.config_state.error:
            status.update(f"settings: {self.config_state.error}")
            status.add_class("status-error")
        elif self.config_state.dirty:
            status.update("settings: modified *")
            status.add_class("status-modified")
        else:
            status.update("settings: loaded")
            status.add_class("status-loaded")

        save_btn.disabled = self.config_state.settings is None or not self.config_state.dirty

    def _refresh_tabs(self) -> None:
        self.query_one(PatternsTab).reload_from_settings()
        self.query_one(OptionsTab).reload_from_settings()

    def _store_label(self) -> str:
        path = getattr(self.settings_store, "path", None)
        return path.name if path is not None else "(custom store)"

    @staticmethod
    def _title_text() -> Text:
        return Text.assemble(
            ("NO", LINKEDIN_BLUE),
            ("SPAM > Filter Settings", "bold"),
        )
