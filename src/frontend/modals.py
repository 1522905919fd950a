"""Confirmation dialogs for the Textual settings editor."""

from __future__ import annotations

from typing import Optional, Tuple

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Static

from core.models import Settings
from .validators import describe_pending_reload, describe_pending_save

# (label, result passed to dismiss, button variant)
Choice = Tuple[str, str, str]


class ConfirmScreen(ModalScreen[str]):
    """Ask how to handle unsaved settings; dismisses with the chosen result."""

    TITLE_TEXT = ""
    CHOICES: Tuple[Choice, ...] = ()

    def __init__(self, body: str) -> None:
        super().__init__()
        self._body = body

    def compose(self) -> ComposeResult:
        yield Container(
            Static(self.TITLE_TEXT, classes="modal-title"),
            Static(self._body, classes="modal-body"),
            Horizontal(
                *(Button(label, name=result, variant=variant) for label, result, variant in self.CHOICES),
                Button("Cancel", name="cancel"),
                classes="modal-actions",
            ),
            classes="modal-dialog",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.name or "cancel")


class UnsavedChangesScreen(ConfirmScreen):
    TITLE_TEXT = "Unsaved changes"
    CHOICES = (
        ("Save", "save", "success"),
        ("Discard", "discard", "error"),
    )

    def __init__(self, settings: Optional[Settings], target: str) -> None:
        super().__init__(describe_pending_save(settings, target, "exit"))


class ReloadConfirmScreen(ConfirmScreen):
    TITLE_TEXT = "Reload settings?"
    CHOICES = (
        ("Save", "save", "default"),
        ("Reload", "reload", "warning"),
    )

    def __init__(self, target: str) -> None:
        super().__init__(describe_pending_reload(target))
