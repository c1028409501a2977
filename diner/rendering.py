"""Rendering helpers for menu rows, badges and averages."""

from __future__ import annotations

from rich.text import Text

from diner.config import CURRENCY_PREFIX, PRICE_DECIMALS
from diner.constant import COURSE_BADGE_STYLES, SCREEN_NAV_LABELS, SCREEN_ORDER
from diner.models import Course, MenuItem, Screen


def badge_style(course: Course) -> str:
    """Return a consistent badge style for course tags."""
    return COURSE_BADGE_STYLES.get(course, "bold")


def format_price(value: float) -> str:
    return f"{CURRENCY_PREFIX} {value:.{PRICE_DECIMALS}f}"


def format_course_badge(course: Course) -> Text:
    text = Text()
    text.append(f" {course.value} ", style=badge_style(course))
    return text


def format_item_summary(item: MenuItem) -> Text:
    """One-line label: badge, name and price."""
    text = format_course_badge(item.course)
    text.append(f" {item.name}", style="bold")
    text.append(f"  {format_price(item.price)}")
    return text


def format_item_card(item: MenuItem, indent: str = "    ") -> Text:
    """Render an item with its description and ingredients underneath."""
    text = format_item_summary(item)
    text.append(f"\n{indent}{item.description}", style="italic")
    ingredients = ", ".join(ingredient.value for ingredient in item.ingredients)
    text.append(f"\n{indent}Ingredients: {ingredients}", style="dim")
    return text


def format_averages(averages: dict[Course, float], counts: dict[Course, int] | None = None) -> Text:
    """Render one line per course in canonical course order."""
    text = Text()
    for idx, course in enumerate(Course):
        if idx > 0:
            text.append("\n")
        text.append_text(format_course_badge(course))
        text.append(f" {format_price(averages.get(course, 0.0))}")
        if counts is not None:
            count = counts.get(course, 0)
            text.append(f"  ({count} item{'' if count == 1 else 's'})", style="dim")
    return text


def format_nav_bar(active: Screen) -> Text:
    text = Text()
    for idx, screen in enumerate(SCREEN_ORDER):
        if idx > 0:
            text.append("  ")
        style = "bold reverse" if screen == active else "dim"
        text.append(f" {SCREEN_NAV_LABELS[screen]} ", style=style)
    return text


def format_empty_state(title: str, message: str) -> Text:
    text = Text()
    text.append(title, style="bold")
    text.append(f"\n{message}", style="dim")
    return text
