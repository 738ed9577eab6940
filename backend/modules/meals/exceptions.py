"""
Meal history module exceptions.
"""

from shared.exceptions import NotFoundError


class MealNotFoundError(NotFoundError):
    """Raised when a meal does not exist or belongs to another user."""

    def __init__(self, meal_id: str):
        super().__init__(
            f"Meal not found: {meal_id}",
            code="MEAL_NOT_FOUND",
            details={"meal_id": meal_id},
        )
