"""Domain models for the chef menu."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum

from chef_menu.config import CHEF_ROLE_VALUE, VIEWER_ROLE_VALUE


class Role(str, Enum):
    """Who is looking at the menu."""

    CHEF = CHEF_ROLE_VALUE
    VIEWER = VIEWER_ROLE_VALUE

    @classmethod
    def from_param(cls, value: str | None) -> Role:
        """Anything other than the chef flag, including absence, is a viewer."""
        if value == CHEF_ROLE_VALUE:
            return cls.CHEF
        return cls.VIEWER

    @property
    def display_name(self) -> str:
        if self is Role.CHEF:
            return "Christoffel (Chef)"
        return "User"


class CourseKind(Enum):
    STARTER = "Starter"
    MAIN = "Main"
    DESSERT = "Dessert"
    OTHER = "Other"


@dataclass(frozen=True)
class Course:
    """A normalized course category: one of the well-known kinds or other(text)."""

    kind: CourseKind
    text: str = ""

    @classmethod
    def parse(cls, raw: str) -> Course:
        folded = " ".join(raw.casefold().split())
        for kind in (CourseKind.STARTER, CourseKind.MAIN, CourseKind.DESSERT):
            if folded == kind.value.casefold():
                return cls(kind)
        return cls(CourseKind.OTHER, string.capwords(folded))

    @property
    def label(self) -> str:
        if self.kind is CourseKind.OTHER:
            return self.text
        return self.kind.value


@dataclass(frozen=True)
class DishRecord:
    """One dish on the menu."""

    id: str
    name: str
    description: str
    course: str
    price: float

    @property
    def normalized_course(self) -> Course:
        return Course.parse(self.course)


@dataclass(frozen=True)
class CourseGroup:
    """Dishes sharing one normalized course label, in source order."""

    label: str
    dishes: tuple[DishRecord, ...]


@dataclass(frozen=True)
class MenuSummary:
    count: int
    average_price: float
