"""Typed-answer entry modal screen."""

from __future__ import annotations

import logging
from typing import Callable

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from storefront.errors import StoreError

logger = logging.getLogger(__name__)


class PromptModal(ModalScreen[object]):
    """
    Prompt for a typed answer and dismiss with its parsed value.

    ``parse`` turns the raw text into the result; a StoreError it raises is
    shown under the entry and the prompt stays open for another try.
    Escape or Ctrl+C dismisses with None.
    """

    CSS = """
    PromptModal {
        align: center middle;
        background: $background 60%;
    }

    #prompt-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #prompt-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #prompt-text {
        color: white;
        margin-bottom: 1;
    }

    #prompt-value {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #prompt-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #prompt-help {
        color: #dddddd;
    }
    """

    MAX_LENGTH = 12

    def __init__(self, title: str, prompt: str, parse: Callable[[str], object]) -> None:
        super().__init__()
        self.title_text = title
        self.prompt_text = prompt
        self.parse_answer = parse
        self.value = ""
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="prompt-dialog"):
            yield Static(self.title_text, id="prompt-title")
            yield Static(self.prompt_text, id="prompt-text")
            yield Static(id="prompt-value", markup=False)
            yield Static(id="prompt-error", markup=False)
            yield Static("Enter confirm. Backspace delete. Esc/Ctrl+C cancel.", id="prompt-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self._confirm()
            event.stop()
            return

        if event.key == "backspace":
            if self.value:
                self.value = self.value[:-1]
                self.error = ""
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            if len(self.value) < self.MAX_LENGTH:
                self.value += event.character
            self.error = ""
            self._refresh_content()
            event.stop()

    def _confirm(self) -> None:
        try:
            parsed = self.parse_answer(self.value)
        except StoreError as exc:
            logger.info("prompt_rejected title=%r value=%r kind=%s", self.title_text, self.value, exc.kind.name)
            self.error = f"Error: {exc.message}"
            self.value = ""
            self._refresh_content()
            return

        self.dismiss(parsed)

    def _refresh_content(self) -> None:
        value_widget = self.query_one("#prompt-value", Static)
        error_widget = self.query_one("#prompt-error", Static)
        value_widget.update(self.value or "")
        error_widget.update(self.error or "")
