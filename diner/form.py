"""Pending state of the add-item form."""

from __future__ import annotations

from dataclasses import dataclass, field

from diner.config import DEFAULT_COURSE, MAX_INGREDIENTS
from diner.models import Course, Ingredient, MenuItem
from diner.store import MenuStore
from diner.validation import build_menu_item, toggle_ingredient


@dataclass
class ItemForm:
    """Raw user-entered fields, kept across failed submits."""

    name: str = ""
    description: str = ""
    course: Course = DEFAULT_COURSE
    ingredients: list[Ingredient] = field(default_factory=list)
    price_text: str = ""

    def toggle_ingredient(self, ingredient: str | Ingredient) -> None:
        """Toggle one ingredient; raises IngredientLimitExceeded on a fifth pick."""
        self.ingredients = toggle_ingredient(self.ingredients, ingredient, MAX_INGREDIENTS)

    def cycle_course(self, delta: int) -> None:
        courses = list(Course)
        self.course = courses[(courses.index(self.course) + delta) % len(courses)]

    def reset(self) -> None:
        self.name = ""
        self.description = ""
        self.course = DEFAULT_COURSE
        self.ingredients = []
        self.price_text = ""

    def build(self) -> MenuItem:
        return build_menu_item(
            name=self.name,
            description=self.description,
            course=self.course,
            ingredients=self.ingredients,
            raw_price=self.price_text,
        )

    def submit(self, store: MenuStore) -> MenuItem:
        """Validate, prepend to ``store`` and clear the form.

        Validation errors propagate before the store is touched and leave
        every field as entered.
        """
        item = self.build()
        store.add(item)
        self.reset()
        return item
