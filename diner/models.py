"""Domain models for the diner menu."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Union


class Course(str, Enum):
    """Closed set of menu categories, in display order."""

    STARTER = "Starter"
    MAIN = "Main"
    DESSERT = "Dessert"
    DRINK = "Drink"


class Ingredient(str, Enum):
    """Ingredient vocabulary offered on the add form."""

    CHEESE = "Cheese"
    PEPPERONI = "Pepperoni"
    BLACK_PEPPER = "Black pepper"
    BASIL = "Basil"
    TOMATO = "Tomato"
    MUSHROOM = "Mushroom"
    GARLIC = "Garlic"
    ONION = "Onion"


class Screen(str, Enum):
    """Top-level views selectable from the nav bar."""

    HOME = "Home"
    ADD = "Add"
    FILTER = "Filter"
    AVERAGE = "Average"


ALL_COURSES = "All"

CourseFilter = Union[Course, Literal["All"]]


@dataclass(frozen=True)
class MenuItem:
    """A single dish record."""

    item_id: str
    name: str
    description: str
    ingredients: tuple[Ingredient, ...]
    price: float
    course: Course


def parse_course_filter(value: str | Course) -> CourseFilter:
    """Resolve a filter label ("All" or a course name) into a selector."""
    if isinstance(value, Course):
        return value
    label = value.strip()
    if label.lower() == ALL_COURSES.lower():
        return ALL_COURSES
    for course in Course:
        if course.value.lower() == label.lower():
            return course
    raise ValueError(f"Unknown course filter: {value!r}")
