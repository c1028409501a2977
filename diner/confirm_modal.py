"""Delete confirmation modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from diner.models import MenuItem
from diner.rendering import format_item_summary


class ConfirmDeleteModal(ModalScreen[bool]):
    """Ask before removing an item; dismisses with True to delete."""

    CSS = """
    ConfirmDeleteModal {
        align: center middle;
        background: $background 60%;
    }

    #confirm-dialog {
        width: 60;
        height: auto;
        border: round $error;
        background: $panel;
        padding: 1 2;
    }

    #confirm-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #confirm-body {
        color: white;
        margin-bottom: 1;
    }

    #confirm-help {
        color: #dddddd;
    }
    """

    def __init__(self, item: MenuItem) -> None:
        super().__init__()
        self.item = item

    def compose(self) -> ComposeResult:
        with Container(id="confirm-dialog"):
            yield Static("Remove item", id="confirm-title")
            yield Static(id="confirm-body")
            yield Static("Y / Enter delete. N / Esc / q cancel.", id="confirm-help")

    def on_mount(self) -> None:
        body = self.query_one("#confirm-body", Static)
        text = format_item_summary(self.item)
        text.append(f'\n\nDelete "{self.item.name}" from the menu?')
        body.update(text)

    def on_key(self, event: Key) -> None:
        if event.key in {"y", "enter"}:
            self.dismiss(True)
            event.stop()
            return

        if event.key in {"n", "escape", "q", "ctrl+c"}:
            self.dismiss(False)
            event.stop()
