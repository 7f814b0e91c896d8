from __future__ import annotations

import asyncio

from chef_menu import codec
from chef_menu.add_dish_screen import AddDishScreen
from chef_menu.bridge import NavigationMessage
from chef_menu.confirm_modal import ConfirmModal
from chef_menu.filter_screen import FilterScreen
from chef_menu.home_screen import HomeScreen
from chef_menu.login_screen import LoginScreen
from chef_menu.menu_app import MenuApp
from chef_menu.models import Role
from chef_menu.remove_dish_screen import RemoveDishScreen


def _home(dishes: str | None = None, role: str = "christoffel") -> NavigationMessage:
    params = {"role": role}
    if dishes is not None:
        params["dishes"] = dishes
    return NavigationMessage("home", params)


def test_chef_adds_then_removes_a_dish():
    async def scenario() -> None:
        app = MenuApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            assert isinstance(app.screen, LoginScreen)

            await pilot.press("k", "enter")
            await pilot.pause()
            assert isinstance(app.screen, HomeScreen)
            assert app.screen.visit.role is Role.CHEF

            await pilot.press("a")
            await pilot.pause()
            assert isinstance(app.screen, AddDishScreen)

            await pilot.press("S", "o", "u", "p", "enter")
            await pilot.press("H", "o", "t", "enter")
            await pilot.press("s", "t", "a", "r", "t", "e", "r", "enter")
            await pilot.press("4", "5", "enter")
            await pilot.pause()

            assert isinstance(app.screen, HomeScreen)
            dishes = app.screen.visit.working.list()
            assert [(dish.name, dish.course, dish.price) for dish in dishes] == [("Soup", "starter", 45.0)]
            assert "newDish" in app.history[-1].params

            await pilot.press("r")
            await pilot.pause()
            assert isinstance(app.screen, RemoveDishScreen)

            await pilot.press("d")
            await pilot.pause()
            assert isinstance(app.screen, ConfirmModal)

            await pilot.press("y")
            await pilot.pause()
            assert isinstance(app.screen, RemoveDishScreen)
            assert app.screen.visit.working.is_empty

            await pilot.press("escape")
            await pilot.pause()
            assert isinstance(app.screen, HomeScreen)
            assert app.screen.visit.working.is_empty

    asyncio.run(scenario())


def test_add_with_missing_fields_stays_on_form():
    async def scenario() -> None:
        app = MenuApp(_home())
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("a")
            await pilot.pause()

            await pilot.press("ctrl+s")
            await pilot.pause()

            assert isinstance(app.screen, AddDishScreen)
            assert app.screen.error == "Please fill in all fields (name is required)"
            assert app.screen.visit.working.is_empty

    asyncio.run(scenario())


def test_cancelled_add_forwards_original_snapshot(sample_menu):
    incoming = codec.encode(sample_menu)

    async def scenario() -> None:
        app = MenuApp(_home(incoming))
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("a")
            await pilot.pause()
            await pilot.press("X", "escape")
            await pilot.pause()

            assert isinstance(app.screen, HomeScreen)
            assert app.history[-1].params["dishes"] == app.history[-2].params["dishes"]
            assert app.screen.visit.working == sample_menu

    asyncio.run(scenario())


def test_cancelled_removal_keeps_menu(sample_menu):
    async def scenario() -> None:
        app = MenuApp(_home(codec.encode(sample_menu)))
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("r")
            await pilot.pause()
            await pilot.press("d", "y")
            await pilot.pause()
            assert len(app.screen.visit.working) == 2

            await pilot.press("c")
            await pilot.pause()

            assert isinstance(app.screen, HomeScreen)
            assert app.screen.visit.working == sample_menu

    asyncio.run(scenario())


def test_reset_menu_is_gated_by_confirmation(sample_menu):
    async def scenario() -> None:
        app = MenuApp(_home(codec.encode(sample_menu)))
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("x", "n")
            await pilot.pause()
            assert app.screen.visit.working == sample_menu

            await pilot.press("x", "y")
            await pilot.pause()
            assert app.screen.visit.working.is_empty

    asyncio.run(scenario())


def test_viewer_cannot_edit(sample_menu):
    async def scenario() -> None:
        app = MenuApp(_home(codec.encode(sample_menu), role="user"))
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("a", "r", "x")
            await pilot.pause()

            assert isinstance(app.screen, HomeScreen)
            assert app.screen.visit.working == sample_menu
            assert "Only the chef" in app.screen.status

    asyncio.run(scenario())


def test_logout_keeps_menu_and_resets_role(sample_menu):
    async def scenario() -> None:
        app = MenuApp(_home(codec.encode(sample_menu)))
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("l")
            await pilot.pause()
            assert isinstance(app.screen, LoginScreen)
            assert "role" not in app.history[-1].params

            await pilot.press("enter")
            await pilot.pause()

            assert isinstance(app.screen, HomeScreen)
            assert app.screen.visit.role is Role.VIEWER
            assert app.screen.visit.working == sample_menu

    asyncio.run(scenario())


def test_filter_screen_groups_and_returns(sample_menu):
    async def scenario() -> None:
        app = MenuApp(_home(codec.encode(sample_menu)))
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("f")
            await pilot.pause()
            assert isinstance(app.screen, FilterScreen)
            assert [group.label for group in app.screen.groups] == ["Starter", "Main", "Dessert"]

            await pilot.press("j")
            await pilot.pause()
            assert app.screen.selected_group().label == "Main"

            await pilot.press("escape")
            await pilot.pause()
            assert isinstance(app.screen, HomeScreen)
            assert app.screen.visit.working == sample_menu

    asyncio.run(scenario())


def test_malformed_snapshot_shows_empty_menu():
    async def scenario() -> None:
        app = MenuApp(_home("[{oops"))
        async with app.run_test() as pilot:
            await pilot.pause()

            assert isinstance(app.screen, HomeScreen)
            assert app.screen.visit.working.is_empty

    asyncio.run(scenario())


def test_home_exits_only_once(sample_menu):
    async def scenario() -> None:
        app = MenuApp(_home(codec.encode(sample_menu)))
        async with app.run_test() as pilot:
            await pilot.pause()
            home = app.screen
            assert isinstance(home, HomeScreen)

            home.action_remove_dish()
            home.action_add_dish()
            home.action_filter_menu()
            home.action_reset_menu()
            home.action_logout()
            await pilot.pause()

            assert isinstance(app.screen, RemoveDishScreen)
            assert [message.route for message in app.history] == ["home", "remove"]

    asyncio.run(scenario())


def test_login_exits_only_once():
    async def scenario() -> None:
        app = MenuApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            login = app.screen
            assert isinstance(login, LoginScreen)

            login.action_login()
            login.action_login()
            await pilot.pause()

            assert isinstance(app.screen, HomeScreen)
            assert [message.route for message in app.history] == ["login", "home"]

    asyncio.run(scenario())


def test_add_shows_price_type_error():
    async def scenario() -> None:
        app = MenuApp(_home())
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("a")
            await pilot.pause()

            await pilot.press("S", "o", "u", "p", "enter")
            await pilot.press("H", "o", "t", "enter")
            await pilot.press("M", "a", "i", "n", "enter")
            await pilot.press("t", "e", "n", "enter")
            await pilot.pause()

            assert isinstance(app.screen, AddDishScreen)
            assert app.screen.error == "Invalid price: 'ten' is not a number"
            assert app.screen.visit.working.is_empty

    asyncio.run(scenario())


def test_remove_list_rerenders_on_resize(sample_menu):
    async def scenario() -> None:
        app = MenuApp(_home(codec.encode(sample_menu)))
        async with app.run_test(size=(80, 40)) as pilot:
            await pilot.pause()
            await pilot.press("r")
            await pilot.pause()
            screen = app.screen
            assert isinstance(screen, RemoveDishScreen)

            refreshes = []
            original_refresh = screen._refresh_list

            def counting_refresh() -> None:
                refreshes.append(True)
                original_refresh()

            screen._refresh_list = counting_refresh
            await pilot.resize_terminal(80, 12)
            await pilot.pause()

            assert refreshes

    asyncio.run(scenario())
