"""Options tab: boolean filter flags."""

from __future__ import annotations

from typing import Any

from textual import on
from textual.containers import Container, Vertical
from textual.widgets import Static, Switch


class OptionsTab(Container):
    """Switches for the settings that apply when no pattern decides."""

    SWITCHES = [
        ("hide_suggested", "Hide suggested posts"),
        ("hide_content_credentials", "Hide posts with content credentials"),
        ("highlight_mode", "Highlight mode (mark matches instead of removing them)"),
    ]

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._loading_form = False

    def compose(self):
        with Vertical(id="options-panel"):
            for field_name, label in self.SWITCHES:
                yield Static(label, classes="form-label")
                yield Switch(id=self._switch_id(field_name))

    def reload_from_settings(self) -> None:
        current = self.app.config_state.settings
        self._loading_form = True
        for field_name, _ in self.SWITCHES:
            switch = self.query_one(f"#{self._switch_id(field_name)}", Switch)
            switch.value = bool(getattr(current, field_name, False))
            switch.disabled = current is None
        self._loading_form = False

    @on(Switch.Changed)
    def _on_switch_changed(self, event: Switch.Changed) -> None:
        if self._loading_form or not event.switch.id:
            return
        field_name = event.switch.id.removeprefix("option-").replace("-", "_")
        self.app.update_filter_settings(**{field_name: bool(event.value)})

    @staticmethod
    def _switch_id(field_name: str) -> str:
        return "option-" + field_name.replace("_", "-")
