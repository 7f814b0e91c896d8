from __future__ import annotations

from itertools import count

import pytest

from chef_menu.collection import MenuCollection


@pytest.fixture
def id_factory():
    counter = count(1)
    return lambda: str(next(counter))


@pytest.fixture
def sample_menu(id_factory) -> MenuCollection:
    menu = MenuCollection()
    menu, _ = menu.add("Tomato Soup", "Roasted tomatoes, basil", "Starter", "45.50", id_factory=id_factory)
    menu, _ = menu.add("Bobotie", "Spiced mince with egg custard", "Main", 120, id_factory=id_factory)
    menu, _ = menu.add("Malva Pudding", "Apricot sponge, custard", "dessert", 65.0, id_factory=id_factory)
    return menu
