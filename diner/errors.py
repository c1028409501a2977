"""Validation errors raised while building menu items."""

from __future__ import annotations


class MenuValidationError(ValueError):
    """Base class for rejected user input; ``message`` is user-facing."""

    message = "Invalid menu item."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingName(MenuValidationError):
    message = "Please enter a name."


class MissingDescription(MenuValidationError):
    message = "Please enter a description."


class NoIngredientsSelected(MenuValidationError):
    message = "Please select at least one ingredient."


class InvalidPrice(MenuValidationError):
    message = "Please enter a valid price (number > 0)."


class IngredientLimitExceeded(MenuValidationError):
    message = "You can select up to 4 ingredients."


class UnknownIngredient(MenuValidationError):
    message = "Unknown ingredient."
