"""Rendering helpers for dish rows and menu stats."""

from __future__ import annotations

from rich.text import Text

from chef_menu.config import CURRENCY_PREFIX
from chef_menu.models import CourseKind, DishRecord, MenuSummary


def format_price(amount: float) -> str:
    """Round to two places for display only."""
    return f"{CURRENCY_PREFIX} {amount:.2f}"


def course_badge_style(kind: CourseKind) -> str:
    """Return a consistent badge style for course tags."""
    if kind is CourseKind.STARTER:
        return "bold #0b1f0f on #5fbf72"
    if kind is CourseKind.MAIN:
        return "bold #ffffff on #b23a48"
    if kind is CourseKind.DESSERT:
        return "bold #ffffff on #2f6db5"
    return "bold #ffffff on #7b2cbf"


def format_course_badge(dish: DishRecord) -> Text:
    course = dish.normalized_course
    return Text(f" {dish.course} ", style=course_badge_style(course.kind))


def format_dish_label(dish: DishRecord, *, show_description: bool = True) -> Text:
    """Render a dish as name, course badge and price, with the description below."""
    text = Text()
    text.append(dish.name, style="bold white")
    text.append(" ")
    text.append_text(format_course_badge(dish))
    text.append(f" {format_price(dish.price)}")
    if show_description and dish.description:
        text.append(f"\n      {dish.description}", style="#cccccc")
    return text


def format_summary(summary: MenuSummary) -> Text:
    text = Text()
    text.append(f"Total Items: {summary.count}", style="bold")
    text.append("   ")
    text.append(f"Average Price: {format_price(summary.average_price)}", style="bold")
    return text


def window_bounds(total: int, rows: int, selected: int | None) -> tuple[int, int]:
    """Return the [start, end) slice of a list that keeps ``selected`` in view."""
    if total <= 0:
        return (0, 0)

    rows = max(1, rows)
    if total <= rows:
        return (0, total)

    if selected is None:
        start = 0
    else:
        half = rows // 2
        start = selected - half
        start = max(0, start)
        start = min(start, total - rows)

    return (start, start + rows)
