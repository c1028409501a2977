"""Derived read-only views over a menu snapshot."""

from __future__ import annotations

from typing import Iterable, Sequence

from diner.models import ALL_COURSES, Course, CourseFilter, MenuItem


def total_count(items: Sequence[MenuItem]) -> int:
    return len(items)


def count_by_course(items: Iterable[MenuItem]) -> dict[Course, int]:
    """Number of items per course; every course is present."""
    counts = {course: 0 for course in Course}
    for item in items:
        counts[item.course] += 1
    return counts


def average_by_course(items: Iterable[MenuItem]) -> dict[Course, float]:
    """
    Mean price per course, unrounded.

    Courses with no items map to 0.0 rather than being omitted.
    """
    totals = {course: 0.0 for course in Course}
    counts = {course: 0 for course in Course}
    for item in items:
        totals[item.course] += item.price
        counts[item.course] += 1
    return {
        course: (totals[course] / counts[course]) if counts[course] else 0.0
        for course in Course
    }


def filter_by_course(items: Sequence[MenuItem], selector: CourseFilter) -> list[MenuItem]:
    """Items matching ``selector`` in their original order; "All" keeps everything."""
    if selector == ALL_COURSES:
        return list(items)
    return [item for item in items if item.course == selector]


def has_course_data(averages: dict[Course, float]) -> bool:
    """False when every course average is zero (empty menu)."""
    return any(value != 0 for value in averages.values())
