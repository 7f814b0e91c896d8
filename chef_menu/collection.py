"""Immutable, ordered dish collection."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Iterator
from uuid import uuid4

from chef_menu.errors import REQUIRED_MESSAGE, ValidationError
from chef_menu.models import DishRecord


def new_dish_id() -> str:
    return uuid4().hex


def _require_text(field: str, value: Any) -> str:
    if value is None:
        raise ValidationError(field, REQUIRED_MESSAGE)
    if not isinstance(value, str):
        raise ValidationError(field, "must be text")
    stripped = value.strip()
    if not stripped:
        raise ValidationError(field, REQUIRED_MESSAGE)
    return stripped


def _parse_price(value: Any) -> float:
    if value is None:
        raise ValidationError("price", REQUIRED_MESSAGE)
    if isinstance(value, bool):
        raise ValidationError("price", "must be a number")
    if isinstance(value, str):
        if not value.strip():
            raise ValidationError("price", REQUIRED_MESSAGE)
        try:
            parsed = float(value.strip())
        except ValueError as exc:
            raise ValidationError("price", f"{value.strip()!r} is not a number") from exc
    elif isinstance(value, (int, float)):
        try:
            parsed = float(value)
        except OverflowError as exc:
            raise ValidationError("price", "is out of range") from exc
    else:
        raise ValidationError("price", "must be a number")

    if not math.isfinite(parsed):
        raise ValidationError("price", "must be a finite number")
    if parsed < 0:
        raise ValidationError("price", "must not be negative")
    return parsed


@dataclass(frozen=True)
class MenuCollection:
    """
    Ordered sequence of dishes with unique ids.

    Every operation returns a new collection, so a caller can keep the
    previous snapshot for as long as it likes.
    """

    dishes: tuple[DishRecord, ...] = ()

    def __post_init__(self) -> None:
        ids = [dish.id for dish in self.dishes]
        if len(ids) != len(set(ids)):
            raise ValueError("dish ids must be unique within a menu")

    def __iter__(self) -> Iterator[DishRecord]:
        return iter(self.dishes)

    def __len__(self) -> int:
        return len(self.dishes)

    def __contains__(self, dish_id: object) -> bool:
        return any(dish.id == dish_id for dish in self.dishes)

    @property
    def is_empty(self) -> bool:
        return not self.dishes

    def list(self) -> tuple[DishRecord, ...]:
        return self.dishes

    def get(self, dish_id: str) -> DishRecord | None:
        for dish in self.dishes:
            if dish.id == dish_id:
                return dish
        return None

    def add(
        self,
        name: Any,
        description: Any,
        course: Any,
        price: Any,
        *,
        id_factory: Callable[[], str] = new_dish_id,
    ) -> tuple[MenuCollection, DishRecord]:
        """
        Validate a new dish and append it.

        Returns the new collection and the created record. Raises
        ValidationError naming the first bad field; self is never changed.
        """
        clean_name = _require_text("name", name)
        clean_description = _require_text("description", description)
        clean_course = _require_text("course", course)
        clean_price = _parse_price(price)

        dish = DishRecord(
            id=id_factory(),
            name=clean_name,
            description=clean_description,
            course=clean_course,
            price=clean_price,
        )
        return self.append(dish), dish

    def append(self, dish: DishRecord) -> MenuCollection:
        if dish.id in self:
            raise ValueError(f"dish id {dish.id!r} is already in use")
        return MenuCollection(self.dishes + (dish,))

    def remove(self, dish_id: str) -> MenuCollection:
        """Drop the dish with this id; an unknown id leaves the menu as it was."""
        if dish_id not in self:
            return self
        return MenuCollection(tuple(dish for dish in self.dishes if dish.id != dish_id))

    def clear(self) -> MenuCollection:
        return MenuCollection()
