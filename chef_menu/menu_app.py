"""Main Textual app class and screen routing."""

from __future__ import annotations

import logging
from typing import Callable, Mapping

from textual.app import App
from textual.screen import Screen

from chef_menu.add_dish_screen import AddDishScreen
from chef_menu.bridge import NavigationMessage
from chef_menu.config import ADD_ROUTE, FILTER_ROUTE, HOME_ROUTE, LOGIN_ROUTE, REMOVE_ROUTE
from chef_menu.filter_screen import FilterScreen
from chef_menu.home_screen import HomeScreen
from chef_menu.login_screen import LoginScreen
from chef_menu.remove_dish_screen import RemoveDishScreen

logger = logging.getLogger(__name__)

ScreenFactory = Callable[[Mapping[str, str]], Screen]

ROUTES: dict[str, ScreenFactory] = {
    LOGIN_ROUTE: LoginScreen,
    HOME_ROUTE: HomeScreen,
    ADD_ROUTE: AddDishScreen,
    REMOVE_ROUTE: RemoveDishScreen,
    FILTER_ROUTE: FilterScreen,
}


class MenuApp(App):
    """A Textual app for curating and viewing Christoffel's menu."""

    TITLE = "Christoffel's Menu"
    SUB_TITLE = "SSIK NOVA"

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, initial: NavigationMessage | None = None) -> None:
        super().__init__()
        self.initial = initial or NavigationMessage(LOGIN_ROUTE)
        self.history: list[NavigationMessage] = []

    def on_mount(self) -> None:
        logger.debug("app_mount route=%s", self.initial.route)
        self.push_screen(self._build_screen(self.initial))
        self.history.append(self.initial)

    def navigate(self, message: NavigationMessage) -> None:
        """Replace the current screen with the one the message is addressed to."""
        screen = self._build_screen(message)
        logger.info("navigate route=%s params=%s", message.route, sorted(message.params))
        self.history.append(message)
        self.switch_screen(screen)

    def _build_screen(self, message: NavigationMessage) -> Screen:
        factory = ROUTES.get(message.route)
        if factory is None:
            raise ValueError(f"unknown route {message.route!r}")
        return factory(dict(message.params))
