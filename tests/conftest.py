from __future__ import annotations

import pytest

from diner.models import Course, Ingredient, MenuItem


@pytest.fixture
def make_item():
    counter = {"n": 0}

    def _make(
        name: str = "Bone Marrow",
        course: Course = Course.MAIN,
        price: float = 89.99,
        ingredients: tuple[Ingredient, ...] = (Ingredient.CHEESE,),
        description: str = "Roasted",
    ) -> MenuItem:
        counter["n"] += 1
        return MenuItem(
            item_id=f"item-{counter['n']}",
            name=name,
            description=description,
            ingredients=ingredients,
            price=price,
            course=course,
        )

    return _make
