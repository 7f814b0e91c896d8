"""Read-only course grouping and summary statistics."""

from __future__ import annotations

from chef_menu.collection import MenuCollection
from chef_menu.models import Course, CourseGroup, DishRecord, MenuSummary


def group_by_course(collection: MenuCollection) -> list[CourseGroup]:
    """Group dishes by normalized course, in first-seen course order."""
    grouped: dict[str, list[DishRecord]] = {}
    for dish in collection:
        grouped.setdefault(dish.normalized_course.label, []).append(dish)
    return [CourseGroup(label=label, dishes=tuple(dishes)) for label, dishes in grouped.items()]


def summarize(collection: MenuCollection) -> MenuSummary:
    count = len(collection)
    if count == 0:
        return MenuSummary(count=0, average_price=0.0)
    return MenuSummary(count=count, average_price=sum(dish.price for dish in collection) / count)


def filter_by_course(collection: MenuCollection, course: str | Course) -> MenuCollection:
    """Keep only dishes whose normalized course matches ``course``."""
    wanted = course if isinstance(course, Course) else Course.parse(course)
    return MenuCollection(tuple(dish for dish in collection if dish.normalized_course == wanted))
