"""JSON transport encoding for menus passed between screens."""

from __future__ import annotations

import json
import math
from typing import Any

from chef_menu.collection import MenuCollection
from chef_menu.errors import MalformedStateError
from chef_menu.models import DishRecord

_TEXT_FIELDS = ("id", "name", "description", "course")
# Description may be empty; the rest identify and place the dish.
_REQUIRED_TEXT_FIELDS = ("id", "name", "course")


def _dish_to_dict(dish: DishRecord) -> dict[str, Any]:
    return {
        "id": dish.id,
        "name": dish.name,
        "description": dish.description,
        "course": dish.course,
        "price": dish.price,
    }


def _dish_from_dict(item: Any, position: str) -> DishRecord:
    if not isinstance(item, dict):
        raise MalformedStateError(f"{position}: expected an object, got {type(item).__name__}")

    for field in (*_TEXT_FIELDS, "price"):
        if field not in item:
            raise MalformedStateError(f"{position}: missing field {field!r}")

    for field in _TEXT_FIELDS:
        if not isinstance(item[field], str):
            raise MalformedStateError(f"{position}: field {field!r} must be a string")

    for field in _REQUIRED_TEXT_FIELDS:
        if not item[field].strip():
            raise MalformedStateError(f"{position}: field {field!r} must not be blank")

    price = item["price"]
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise MalformedStateError(f"{position}: field 'price' must be a number")
    try:
        value = float(price)
    except OverflowError as exc:
        raise MalformedStateError(f"{position}: field 'price' is out of range") from exc
    if not math.isfinite(value) or value < 0:
        raise MalformedStateError(f"{position}: field 'price' must be a non-negative number")

    return DishRecord(
        id=item["id"],
        name=item["name"],
        description=item["description"],
        course=item["course"],
        price=value,
    )


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedStateError(f"not valid JSON: {exc}") from exc


def encode(collection: MenuCollection) -> str:
    """Serialize a menu into its transport string."""
    return json.dumps([_dish_to_dict(dish) for dish in collection], ensure_ascii=False, allow_nan=False)


def decode(text: str | None) -> MenuCollection:
    """
    Rebuild a menu from a transport string.

    Absent or blank input is an empty menu. Anything else that is not an
    array of well-formed dish objects with unique ids raises MalformedStateError.
    """
    if text is None or not text.strip():
        return MenuCollection()

    data = _loads(text)
    if not isinstance(data, list):
        raise MalformedStateError(f"expected an array of dishes, got {type(data).__name__}")

    dishes = [_dish_from_dict(item, f"dish {idx}") for idx, item in enumerate(data)]
    seen: set[str] = set()
    for dish in dishes:
        if dish.id in seen:
            raise MalformedStateError(f"duplicate dish id {dish.id!r}")
        seen.add(dish.id)
    return MenuCollection(tuple(dishes))


def encode_dish(dish: DishRecord) -> str:
    """Serialize a single dish for the side channel."""
    return json.dumps(_dish_to_dict(dish), ensure_ascii=False, allow_nan=False)


def decode_dish(text: str) -> DishRecord:
    """Rebuild a single side-channel dish."""
    return _dish_from_dict(_loads(text), "dish")
