from __future__ import annotations

import json

import pytest

from chef_menu import codec
from chef_menu.collection import MenuCollection
from chef_menu.errors import MalformedStateError
from chef_menu.models import DishRecord


def test_round_trip_keeps_content_and_order(sample_menu):
    assert codec.decode(codec.encode(sample_menu)) == sample_menu


def test_round_trip_keeps_unrounded_prices_and_unicode():
    dish = DishRecord(id="a1", name="Crème brûlée", description="Vanilla “bean”", course="Dessert", price=0.1 + 0.2)
    menu = MenuCollection((dish,))

    decoded = codec.decode(codec.encode(menu))

    assert decoded.list()[0].price == 0.1 + 0.2
    assert decoded == menu


def test_encode_uses_exact_field_names_and_number_price(sample_menu):
    data = json.loads(codec.encode(sample_menu))

    assert [sorted(item) for item in data] == [["course", "description", "id", "name", "price"]] * 3
    assert data[0]["price"] == 45.5


@pytest.mark.parametrize("text", [None, "", "   "])
def test_decode_absent_input_is_empty(text):
    assert codec.decode(text) == MenuCollection()


def test_decode_accepts_integer_price():
    text = '[{"id": "1", "name": "Soup", "description": "", "course": "Starter", "price": 10}]'

    assert codec.decode(text).list()[0].price == 10.0


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        '{"id": "1"}',
        "[1, 2]",
        '[{"id": "1", "name": "Soup", "description": "", "course": "Starter"}]',
        '[{"id": 1, "name": "Soup", "description": "", "course": "Starter", "price": 1}]',
        '[{"id": "1", "name": "Soup", "description": "", "course": "Starter", "price": "1"}]',
        '[{"id": "1", "name": "Soup", "description": "", "course": "Starter", "price": true}]',
        '[{"id": "1", "name": "Soup", "description": "", "course": "Starter", "price": -2}]',
        '[{"id": "1", "name": "Soup", "description": "", "course": "Starter", "price": 1e400}]',
        '[{"id": "", "name": "Soup", "description": "", "course": "Starter", "price": 1}]',
        '[{"id": "1", "name": "", "description": "", "course": "Starter", "price": 1}]',
        '[{"id": "1", "name": "  ", "description": "", "course": "Starter", "price": 1}]',
        '[{"id": "1", "name": "Soup", "description": "", "course": "   ", "price": 1}]',
        '[{"id": "1", "name": "A", "description": "", "course": "Main", "price": 1},'
        ' {"id": "1", "name": "B", "description": "", "course": "Main", "price": 2}]',
    ],
)
def test_decode_malformed_raises(text):
    with pytest.raises(MalformedStateError):
        codec.decode(text)


def test_single_dish_side_channel_round_trip(sample_menu):
    dish = sample_menu.list()[1]

    assert codec.decode_dish(codec.encode_dish(dish)) == dish


def test_decode_dish_rejects_array():
    with pytest.raises(MalformedStateError):
        codec.decode_dish("[]")


def test_decode_dish_rejects_blank_name():
    with pytest.raises(MalformedStateError):
        codec.decode_dish('{"id": "7", "name": "", "description": "", "course": "Main", "price": 5}')


def test_decode_allows_empty_description():
    text = '[{"id": "1", "name": "Soup", "description": "", "course": "Starter", "price": 1}]'

    assert codec.decode(text).list()[0].description == ""
