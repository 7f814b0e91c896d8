"""Add dish form screen."""

from __future__ import annotations

import logging
from typing import Mapping

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Header, Input, Static

from chef_menu.bridge import ScreenVisit
from chef_menu.config import HOME_ROUTE, WELL_KNOWN_COURSES
from chef_menu.errors import REQUIRED_MESSAGE, ValidationError

logger = logging.getLogger(__name__)


class AddDishScreen(Screen):
    """Collect name, description, course and price for one new dish."""

    FIELD_IDS = ("dish-name", "dish-description", "dish-course", "dish-price")

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        Binding("ctrl+s", "submit", "Add Dish", priority=True),
    ]

    CSS = """
    #add-form {
        width: 64;
        height: auto;
        border: round $primary;
        padding: 1 2;
    }

    #add-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #add-error {
        color: #ffb3b3;
        margin-top: 1;
    }

    #add-help {
        color: #dddddd;
        margin-top: 1;
    }
    """

    def __init__(self, params: Mapping[str, str] | None = None) -> None:
        super().__init__()
        self.visit = ScreenVisit.open(params)
        self.error = ""

    def compose(self) -> ComposeResult:
        with_courses = " / ".join(WELL_KNOWN_COURSES)
        yield Header()
        with Vertical(id="add-form"):
            yield Static("Add New Dish", id="add-title")
            yield Input(placeholder="Dish Name", id="dish-name")
            yield Input(placeholder="Description", id="dish-description")
            yield Input(placeholder=f"Course ({with_courses})", id="dish-course")
            yield Input(placeholder="Price (R)", id="dish-price")
            yield Static(id="add-error")
            yield Static("Enter next field / add. Ctrl+S add. Esc cancel.", id="add-help")

    def on_mount(self) -> None:
        self.query_one("#dish-name", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        field_id = event.input.id
        if field_id in self.FIELD_IDS[:-1]:
            next_id = self.FIELD_IDS[self.FIELD_IDS.index(field_id) + 1]
            self.query_one(f"#{next_id}", Input).focus()
            return
        self.action_submit()

    def action_submit(self) -> None:
        if not self.visit.is_active:
            return
        name, description, course, price = (self.query_one(f"#{field_id}", Input).value for field_id in self.FIELD_IDS)
        try:
            working, dish = self.visit.working.add(name, description, course, price)
        except ValidationError as exc:
            if exc.message == REQUIRED_MESSAGE:
                self.error = f"Please fill in all fields ({exc.field} {exc.message})"
            else:
                self.error = f"Invalid {exc.field}: {exc.message}"
            logger.debug("Add dish rejected field=%s reason=%s", exc.field, exc.message)
            self._refresh_error()
            self.query_one(f"#dish-{exc.field}", Input).focus()
            return

        self.visit.replace(working)
        logger.info("Dish added id=%s name=%r course=%r", dish.id, dish.name, dish.course)
        self.app.notify(f"{dish.name} added to the menu", title="Success")
        self.app.navigate(self.visit.confirm(HOME_ROUTE, new_dish=dish))

    def action_cancel(self) -> None:
        if not self.visit.is_active:
            return
        self.app.navigate(self.visit.cancel(HOME_ROUTE))

    def _refresh_error(self) -> None:
        self.query_one("#add-error", Static).update(self.error)
