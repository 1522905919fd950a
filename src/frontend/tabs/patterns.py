"""Patterns tab: edit filter patterns and try them on sample text."""

from __future__ import annotations

from typing import Any

from textual import on
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, Input, Static, Switch, TextArea

from adapters.text_entry import TextEntry
from core.filter_engine import FilterEngine
from ..validators import describe_decision, describe_invalid_directives


class PatternsTab(Container):
    """Pattern editor with a tester for the current (unsaved) settings."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._loading_form = False

    def compose(self):
        with Horizontal(id="patterns-body"):
            with Vertical(id="patterns-left"):
                yield Static("filter patterns (one per line)", classes="form-label")
                yield TextArea(id="filter-patterns")
                yield Static("", id="patterns-invalid", classes="settings-error")
            with Vertical(id="patterns-right"):
                yield Static("Pattern tester", id="patterns-test-title")
                yield Static("post text", classes="form-label")
                yield TextArea(id="test-text")
                yield Static("reacted by (optional)", classes="form-label")
                yield Input(placeholder="Jane Doe", id="test-reacted-by")
                yield Static("suggested", classes="form-label")
                yield Switch(id="test-suggested")
                yield Static("content credentials", classes="form-label")
                yield Switch(id="test-credentials")
                with Horizontal(id="patterns-test-actions"):
                    yield Button("Test", id="run-test", variant="primary")
                yield Static("", id="test-result")

    def reload_from_settings(self) -> None:
        current = self.app.config_state.settings
        editor = self.query_one("#filter-patterns", TextArea)
        self._loading_form = True
        editor.text = current.filter_patterns if current else ""
        editor.disabled = current is None
        self._loading_form = False
        self._refresh_invalid(editor.text)

    @on(TextArea.Changed, "#filter-patterns")
    def _on_patterns_changed(self, event: TextArea.Changed) -> None:
        if self._loading_form:
            return
        text = event.text_area.text
        self.app.update_filter_settings(filter_patterns=text)
        self._refresh_invalid(text)

    def _refresh_invalid(self, text: str) -> None:
        self.query_one("#patterns-invalid", Static).update(describe_invalid_directives(text))

    @on(Button.Pressed, "#run-test")
    def _on_run_test(self) -> None:
        result = self.query_one("#test-result", Static)
        current = self.app.config_state.settings
        if current is None:
            result.update("Settings are not loaded.")
            return
        text = self.query_one("#test-text", TextArea).text
        if not text.strip():
            result.update("Add test text to run.")
            return
        reacted_by = self.query_one("#test-reacted-by", Input).value.strip()
        entry = TextEntry(
            text=text,
            reacted_by_name=reacted_by or None,
            suggested=self.query_one("#test-suggested", Switch).value,
            content_credentials=self.query_one("#test-credentials", Switch).value,
        )
        result.update(describe_decision(FilterEngine(current).decide(entry)))
