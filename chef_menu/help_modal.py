"""Help modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from chef_menu.models import Role

_CHEF_HELP = """\
A  add a dish to the menu
F  view dishes by course (Starter, Main, Dessert)
R  remove dishes from the menu
X  reset the menu (asks first)
L  log out
H  this help"""

_VIEWER_HELP = """\
You are viewing the menu. Only the chef can change it.
L  log out
H  this help"""


class HelpModal(ModalScreen[None]):
    """Centered modal with key help for the current role."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("h", "close", "Close"),
    ]

    CSS = """
    HelpModal {
        align: center middle;
        background: $background 60%;
    }

    #help-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #help-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #help-body {
        color: white;
        margin-bottom: 1;
    }

    #help-footer {
        color: #dddddd;
    }
    """

    def __init__(self, role: Role) -> None:
        super().__init__()
        self.role = role

    def compose(self) -> ComposeResult:
        body = _CHEF_HELP if self.role is Role.CHEF else _VIEWER_HELP
        with Container(id="help-dialog"):
            yield Static("Help", id="help-title")
            yield Static(body, id="help-body")
            yield Static("Esc/q close", id="help-footer")

    def action_close(self) -> None:
        self.dismiss()
