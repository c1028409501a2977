"""Editable static display configuration."""

from __future__ import annotations

from diner.models import ALL_COURSES, Course, CourseFilter, Screen

SCREEN_ORDER: list[Screen] = [Screen.HOME, Screen.ADD, Screen.FILTER, Screen.AVERAGE]

SCREEN_HOTKEYS: dict[str, Screen] = {
    "h": Screen.HOME,
    "1": Screen.HOME,
    "a": Screen.ADD,
    "2": Screen.ADD,
    "f": Screen.FILTER,
    "3": Screen.FILTER,
    "v": Screen.AVERAGE,
    "4": Screen.AVERAGE,
}

SCREEN_NAV_LABELS: dict[Screen, str] = {
    Screen.HOME: "[H] Home",
    Screen.ADD: "[A] Add",
    Screen.FILTER: "[F] Filter",
    Screen.AVERAGE: "[V] Avg",
}

COURSE_BADGE_STYLES: dict[Course, str] = {
    Course.STARTER: "bold #0b1f0f on #5fbf72",
    Course.MAIN: "bold #ffffff on #b23a48",
    Course.DESSERT: "bold #1f140b on #e0b050",
    Course.DRINK: "bold #ffffff on #2f6db5",
}

FILTER_OPTIONS: list[CourseFilter] = [ALL_COURSES, *Course]

EMPTY_STATES: dict[str, tuple[str, str]] = {
    "home": ("No menu yet", "Add your first dish from the Add screen."),
    "filter": ("No results", "Try a different course or add items from the Add screen."),
    "average": ("No data yet", "Add some menu items first, then come back to see averages."),
}

NAME_PLACEHOLDER = "e.g., Bone Marrow"
DESCRIPTION_PLACEHOLDER = "Short description..."
PRICE_PLACEHOLDER = "e.g., 89.99"
