"""Remove dish screen."""

from __future__ import annotations

import logging
from typing import Mapping

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Header, Static

from chef_menu.bridge import Decision, ScreenVisit, gate
from chef_menu.config import HOME_ROUTE
from chef_menu.confirm_modal import ConfirmModal
from chef_menu.models import DishRecord
from chef_menu.rendering import format_dish_label, window_bounds

logger = logging.getLogger(__name__)


class RemoveDishScreen(Screen):
    """Pick dishes to delete; going back keeps the edits, cancel drops them."""

    BINDINGS = [
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("up", "move_cursor(-1)", "Previous"),
        ("d", "remove_selected", "Remove"),
        ("escape", "go_back", "Go Back"),
        ("b", "go_back", "Go Back"),
        ("c", "cancel", "Cancel"),
    ]

    CSS = """
    #remove-layout {
        height: 1fr;
        padding: 0 1;
    }

    #remove-title {
        text-style: bold;
    }

    #remove-list {
        height: 1fr;
        border: round $error;
        padding: 0 1;
    }

    #remove-help {
        color: #dddddd;
    }
    """

    def __init__(self, params: Mapping[str, str] | None = None) -> None:
        super().__init__()
        self.visit = ScreenVisit.open(params)
        self.selected_index: int | None = 0 if not self.visit.working.is_empty else None
        self.status = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="remove-layout"):
            yield Static("Remove Dish", id="remove-title")
            yield Static("Press D to delete the selected dish from the menu.")
            yield Static(id="remove-list")
            yield Static(id="remove-help")

    def on_mount(self) -> None:
        self._refresh_list()

    def on_resize(self) -> None:
        self._refresh_list()

    def selected_dish(self) -> DishRecord | None:
        dishes = self.visit.working.list()
        if self.selected_index is None or not (0 <= self.selected_index < len(dishes)):
            return None
        return dishes[self.selected_index]

    def action_move_cursor(self, delta: int) -> None:
        total = len(self.visit.working)
        if not total:
            return
        if self.selected_index is None:
            self.selected_index = 0 if delta > 0 else total - 1
        else:
            self.selected_index = (self.selected_index + delta) % total
        self._refresh_list()

    def action_remove_selected(self) -> None:
        dish = self.selected_dish()
        if dish is None or not self.visit.is_active:
            return
        self.app.push_screen(
            ConfirmModal("Remove Dish", f"Remove {dish.name} from the menu?"),
            lambda decision: self._on_remove_decision(dish.id, decision),
        )

    def action_go_back(self) -> None:
        if not self.visit.is_active:
            return
        self.app.navigate(self.visit.back(HOME_ROUTE))

    def action_cancel(self) -> None:
        if not self.visit.is_active:
            return
        self.app.navigate(self.visit.cancel(HOME_ROUTE))

    def _on_remove_decision(self, dish_id: str, decision: Decision | None) -> None:
        if decision is None or not self.visit.is_active:
            return
        self.visit.replace(gate(decision, self.visit.working, lambda menu: menu.remove(dish_id)))
        if decision is Decision.CONFIRMED:
            logger.info("Dish removed id=%s", dish_id)
            self.status = "Dish removed"
        else:
            self.status = "Removal cancelled"

        total = len(self.visit.working)
        if not total:
            self.selected_index = None
        elif self.selected_index is not None:
            self.selected_index = min(self.selected_index, total - 1)
        self._refresh_list()

    def _refresh_list(self) -> None:
        try:
            list_widget = self.query_one("#remove-list", Static)
        except NoMatches:
            return
        help_widget = self.query_one("#remove-help", Static)
        keys = "J/K/↑/↓ move, D remove, Esc/B go back, C cancel"
        help_widget.update(f"{keys}\n{self.status}" if self.status else keys)

        dishes = self.visit.working.list()
        if not dishes:
            list_widget.update("The menu is empty. Nothing to remove.")
            return

        height = list_widget.size.height
        visible_rows = max(1, height // 2) if height > 0 else 8
        start, end = window_bounds(len(dishes), visible_rows, self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.selected_index else "  "
            lines.append(pointer)
            lines.append_text(format_dish_label(dishes[idx]))
        if end < len(dishes):
            lines.append("\n⋮", style="dim")
        list_widget.update(lines)
