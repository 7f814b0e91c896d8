"""Yes/no confirmation modal for destructive menu actions."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from chef_menu.bridge import Decision


class ConfirmModal(ModalScreen[Decision]):
    """Ask before removing a dish or clearing the menu."""

    BINDINGS = [
        ("y", "decide('confirmed')", "Yes"),
        ("enter", "decide('confirmed')", "Yes"),
        ("n", "decide('cancelled')", "Cancel"),
        ("escape", "decide('cancelled')", "Cancel"),
        ("q", "decide('cancelled')", "Cancel"),
    ]

    CSS = """
    ConfirmModal {
        align: center middle;
        background: $background 60%;
    }

    #confirm-dialog {
        width: 56;
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

    #confirm-prompt {
        color: white;
        margin-bottom: 1;
    }

    #confirm-help {
        color: #dddddd;
    }
    """

    def __init__(self, title: str, prompt: str) -> None:
        super().__init__()
        self.title_text = title
        self.prompt = prompt

    def compose(self) -> ComposeResult:
        with Container(id="confirm-dialog"):
            yield Static(self.title_text, id="confirm-title")
            yield Static(self.prompt, id="confirm-prompt")
            yield Static("Y/Enter yes. N/Esc cancel.", id="confirm-help")

    def action_decide(self, outcome: str) -> None:
        self.dismiss(Decision(outcome))
