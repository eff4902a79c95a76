"""Single-key Y/N question modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static


class ConfirmModal(ModalScreen[str | None]):
    """Ask a Y/N question; dismiss with the key typed, or None on Esc."""

    CSS = """
    ConfirmModal {
        align: center middle;
        background: $background 60%;
    }

    #confirm-dialog {
        width: 60;
        height: auto;
        border: round $primary;
        background: $panel;
        padding: 1 2;
    }

    #confirm-question {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #confirm-help {
        color: #dddddd;
    }
    """

    def __init__(self, question: str) -> None:
        super().__init__()
        self.question = question

    def compose(self) -> ComposeResult:
        with Container(id="confirm-dialog"):
            yield Static(self.question, id="confirm-question")
            yield Static("Press Y or N. Esc cancel.", id="confirm-help")

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.is_printable and event.character:
            self.dismiss(event.character)
            event.stop()
