"""Home screen: the current menu, stats and chef actions."""

from __future__ import annotations

import logging
from typing import Mapping

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Header, Static

from chef_menu.aggregation import summarize
from chef_menu.bridge import Decision, ScreenVisit, gate
from chef_menu.collection import MenuCollection
from chef_menu.config import ADD_ROUTE, FILTER_ROUTE, PARAM_NEW_DISH, REMOVE_ROUTE
from chef_menu.confirm_modal import ConfirmModal
from chef_menu.help_modal import HelpModal
from chef_menu.models import Role
from chef_menu.rendering import format_dish_label, format_summary

logger = logging.getLogger(__name__)


class HomeScreen(Screen):
    """Lists the menu for everyone; the chef also gets add/filter/remove/reset."""

    BINDINGS = [
        ("a", "add_dish", "Add Dish"),
        ("f", "filter_menu", "Filter Menu"),
        ("r", "remove_dish", "Remove Dish"),
        ("x", "reset_menu", "Reset Menu"),
        ("h", "help", "Help"),
        ("l", "logout", "Logout"),
    ]

    CSS = """
    #home-layout {
        height: 1fr;
        padding: 0 1;
    }

    #home-title {
        text-style: bold;
    }

    #home-role {
        color: $text-muted;
        margin-bottom: 1;
    }

    #menu-list {
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }

    #stats-box {
        border: round $secondary;
        padding: 0 1;
        height: 3;
    }

    #home-actions {
        color: #dddddd;
        height: auto;
    }
    """

    def __init__(self, params: Mapping[str, str] | None = None) -> None:
        super().__init__()
        params = params or {}
        self.visit = ScreenVisit.open(params)
        self.new_dish_param = params.get(PARAM_NEW_DISH)
        self.status = ""

    @property
    def is_chef(self) -> bool:
        return self.visit.role is Role.CHEF

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="home-layout"):
            yield Static("Christoffel's Menu", id="home-title")
            yield Static(f"Logged in as: {self.visit.role.display_name}", id="home-role")
            yield Static(id="menu-list")
            yield Static(id="stats-box")
            yield Static(id="home-actions")

    def on_mount(self) -> None:
        self.visit.apply_side_channel(self.new_dish_param)
        self._refresh_all()

    def action_add_dish(self) -> None:
        if not self.visit.is_active:
            return
        if not self._chef_only("add dishes"):
            return
        self.app.navigate(self.visit.confirm(ADD_ROUTE))

    def action_filter_menu(self) -> None:
        if not self.visit.is_active:
            return
        if not self._chef_only("filter the menu"):
            return
        self.app.navigate(self.visit.confirm(FILTER_ROUTE))

    def action_remove_dish(self) -> None:
        if not self.visit.is_active:
            return
        if not self._chef_only("remove dishes"):
            return
        self.app.navigate(self.visit.confirm(REMOVE_ROUTE))

    def action_reset_menu(self) -> None:
        if not self.visit.is_active:
            return
        if not self._chef_only("reset the menu"):
            return
        self.app.push_screen(
            ConfirmModal("Reset Menu", "Are you sure you want to clear all dishes?"),
            self._on_reset_decision,
        )

    def action_help(self) -> None:
        self.app.push_screen(HelpModal(self.visit.role))

    def action_logout(self) -> None:
        if not self.visit.is_active:
            return
        self.app.navigate(self.visit.logout())

    def _on_reset_decision(self, decision: Decision | None) -> None:
        if decision is None or not self.visit.is_active:
            return
        before = len(self.visit.working)
        self.visit.replace(gate(decision, self.visit.working, MenuCollection.clear))
        if decision is Decision.CONFIRMED:
            logger.info("Menu reset, %d dishes cleared", before)
            self.status = "Menu cleared"
        else:
            self.status = "Reset cancelled"
        self._refresh_all()

    def _chef_only(self, what: str) -> bool:
        if self.is_chef:
            return True
        self.status = f"Only the chef can {what}"
        self._refresh_actions()
        return False

    def _refresh_all(self) -> None:
        self._refresh_menu()
        self._refresh_actions()

    def _refresh_menu(self) -> None:
        dishes = self.visit.working.list()
        menu_widget = self.query_one("#menu-list", Static)
        if not dishes:
            menu_widget.update("No dishes yet. Add a dish to get started.")
        else:
            lines = Text()
            lines.append("Current Menu\n", style="bold underline")
            for idx, dish in enumerate(dishes):
                if idx > 0:
                    lines.append("\n")
                lines.append(f"{idx + 1}. ")
                lines.append_text(format_dish_label(dish))
            menu_widget.update(lines)
        self.query_one("#stats-box", Static).update(format_summary(summarize(self.visit.working)))

    def _refresh_actions(self) -> None:
        if self.is_chef:
            keys = "A add · F filter · R remove · X reset · H help · L logout"
        else:
            keys = "H help · L logout"
        status = self.status or "Ready"
        self.query_one("#home-actions", Static).update(f"{keys}\n{status}")
