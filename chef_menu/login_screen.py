"""Role selection screen."""

from __future__ import annotations

from typing import Mapping

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Header, Static

from chef_menu.bridge import ScreenVisit
from chef_menu.config import HOME_ROUTE
from chef_menu.models import Role


class LoginScreen(Screen):
    """Pick chef or viewer, then carry any menu already in flight to home."""

    ROLE_OPTIONS = (Role.CHEF, Role.VIEWER)

    BINDINGS = [
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("up", "move_cursor(-1)", "Previous"),
        ("enter", "login", "Login"),
    ]

    CSS = """
    #login-pane {
        width: 48;
        height: auto;
        border: round $primary;
        padding: 1 2;
    }

    #login-brand {
        text-style: bold;
        color: #c77dff;
    }

    #login-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #login-help {
        margin-top: 1;
        color: $text-muted;
    }
    """

    def __init__(self, params: Mapping[str, str] | None = None) -> None:
        super().__init__()
        self.visit = ScreenVisit.open(params)
        self.cursor_index = self.ROLE_OPTIONS.index(Role.VIEWER)

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="login-pane"):
            yield Static("SSIK NOVA", id="login-brand")
            yield Static("Welcome", id="login-title")
            yield Static("Select Login Type:")
            yield Static(id="login-options")
            yield Static("J/K/↑/↓ move, Enter login", id="login-help")

    def on_mount(self) -> None:
        self._refresh_options()

    @property
    def selected_role(self) -> Role:
        return self.ROLE_OPTIONS[self.cursor_index]

    def action_move_cursor(self, delta: int) -> None:
        self.cursor_index = (self.cursor_index + delta) % len(self.ROLE_OPTIONS)
        self._refresh_options()

    def action_login(self) -> None:
        if not self.visit.is_active:
            return
        self.app.navigate(self.visit.confirm(HOME_ROUTE, role=self.selected_role))

    def _refresh_options(self) -> None:
        lines = Text()
        for idx, role in enumerate(self.ROLE_OPTIONS):
            if idx > 0:
                lines.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            style = "bold white" if idx == self.cursor_index else "white"
            lines.append(f"{pointer}{role.display_name}", style=style)
        self.query_one("#login-options", Static).update(lines)
