"""Filter screen: the menu grouped by course."""

from __future__ import annotations

from typing import Mapping

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Header, Static

from chef_menu.aggregation import filter_by_course, group_by_course, summarize
from chef_menu.bridge import ScreenVisit
from chef_menu.config import HOME_ROUTE
from chef_menu.models import CourseGroup
from chef_menu.rendering import format_dish_label, format_summary


class FilterScreen(Screen):
    """Read-only view of dishes by course."""

    BINDINGS = [
        ("j", "cycle_course(1)", "Next course"),
        ("k", "cycle_course(-1)", "Previous course"),
        ("tab", "cycle_course(1)", "Next course"),
        ("down", "cycle_course(1)", "Next course"),
        ("up", "cycle_course(-1)", "Previous course"),
        ("escape", "go_back", "Back"),
        ("b", "go_back", "Back"),
    ]

    CSS = """
    #filter-layout {
        height: 1fr;
    }

    #course-pane {
        width: 1fr;
        border: round $secondary;
        padding: 0 1;
    }

    #dishes-pane {
        width: 3fr;
        border: round $primary;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #filter-help {
        color: #dddddd;
    }
    """

    def __init__(self, params: Mapping[str, str] | None = None) -> None:
        super().__init__()
        self.visit = ScreenVisit.open(params)
        self.groups: list[CourseGroup] = group_by_course(self.visit.working)
        self.selected_index = 0

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="filter-layout"):
            with Vertical(id="course-pane"):
                yield Static("Courses", classes="pane-title")
                yield Static(id="course-list")
            with Vertical(id="dishes-pane"):
                yield Static(id="course-title", classes="pane-title")
                yield Static(id="course-dishes")
                yield Static(id="course-stats")
        yield Static("J/K/Tab move between courses, Esc/B back", id="filter-help")

    def on_mount(self) -> None:
        self._refresh_all()

    def selected_group(self) -> CourseGroup | None:
        if not self.groups:
            return None
        return self.groups[self.selected_index]

    def action_cycle_course(self, delta: int) -> None:
        if not self.groups:
            return
        self.selected_index = (self.selected_index + delta) % len(self.groups)
        self._refresh_all()

    def action_go_back(self) -> None:
        if not self.visit.is_active:
            return
        self.app.navigate(self.visit.cancel(HOME_ROUTE))

    def _refresh_all(self) -> None:
        course_list = self.query_one("#course-list", Static)
        title = self.query_one("#course-title", Static)
        dishes_widget = self.query_one("#course-dishes", Static)
        stats = self.query_one("#course-stats", Static)

        group = self.selected_group()
        if group is None:
            course_list.update("(no courses)")
            title.update("No dishes yet")
            dishes_widget.update("")
            stats.update("")
            return

        lines = Text()
        for idx, candidate in enumerate(self.groups):
            if idx > 0:
                lines.append("\n")
            pointer = "➤ " if idx == self.selected_index else "  "
            lines.append(f"{pointer}{candidate.label} ({len(candidate.dishes)})")
        course_list.update(lines)

        title.update(group.label)
        body = Text()
        for idx, dish in enumerate(group.dishes):
            if idx > 0:
                body.append("\n")
            body.append_text(format_dish_label(dish))
        dishes_widget.update(body)
        stats.update(format_summary(summarize(filter_by_course(self.visit.working, group.label))))
