"""Turn raw form fields into validated menu items."""

from __future__ import annotations

import math
import re
from typing import Iterable
from uuid import uuid4

from diner.config import MAX_INGREDIENTS, MIN_INGREDIENTS
from diner.errors import (
    IngredientLimitExceeded,
    InvalidPrice,
    MissingDescription,
    MissingName,
    NoIngredientsSelected,
    UnknownIngredient,
)
from diner.models import Course, Ingredient, MenuItem

_DECIMAL_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def new_item_id() -> str:
    return uuid4().hex


def parse_price(raw_price: str | float | int) -> float:
    """Parse a price; must be a finite number strictly greater than zero."""
    if isinstance(raw_price, bool):
        raise InvalidPrice()
    if isinstance(raw_price, str):
        raw_price = raw_price.strip()
        if not _DECIMAL_PATTERN.fullmatch(raw_price):
            raise InvalidPrice()
    try:
        price = float(raw_price)
    except (TypeError, ValueError):
        raise InvalidPrice() from None
    if not math.isfinite(price) or price <= 0:
        raise InvalidPrice()
    return price


def coerce_ingredient(value: str | Ingredient) -> Ingredient:
    """Map a label onto the ingredient vocabulary."""
    if isinstance(value, Ingredient):
        return value
    label = value.strip().lower()
    for ingredient in Ingredient:
        if ingredient.value.lower() == label:
            return ingredient
    raise UnknownIngredient(f"Unknown ingredient: {value!r}.")


def toggle_ingredient(
    selection: Iterable[Ingredient],
    ingredient: str | Ingredient,
    limit: int = MAX_INGREDIENTS,
) -> list[Ingredient]:
    """
    Return a new selection with ``ingredient`` toggled.

    Selecting one past ``limit`` raises IngredientLimitExceeded; the caller's
    selection is never modified.
    """
    current = list(selection)
    target = coerce_ingredient(ingredient)
    if target in current:
        return [item for item in current if item != target]
    if len(current) >= limit:
        raise IngredientLimitExceeded(f"You can select up to {limit} ingredients.")
    return [*current, target]


def build_menu_item(
    name: str,
    description: str,
    course: Course,
    ingredients: Iterable[str | Ingredient],
    raw_price: str | float | int,
    item_id: str | None = None,
) -> MenuItem:
    """Validate candidate fields and produce an immutable MenuItem."""
    clean_name = name.strip()
    if not clean_name:
        raise MissingName()

    clean_description = description.strip()
    if not clean_description:
        raise MissingDescription()

    # dict.fromkeys keeps first-seen order while collapsing repeats
    chosen = tuple(dict.fromkeys(coerce_ingredient(value) for value in ingredients))
    if len(chosen) < MIN_INGREDIENTS:
        raise NoIngredientsSelected()
    if len(chosen) > MAX_INGREDIENTS:
        raise IngredientLimitExceeded(f"You can select up to {MAX_INGREDIENTS} ingredients.")

    price = parse_price(raw_price)

    return MenuItem(
        item_id=item_id or new_item_id(),
        name=clean_name,
        description=clean_description,
        ingredients=chosen,
        price=price,
        course=Course(course),
    )
