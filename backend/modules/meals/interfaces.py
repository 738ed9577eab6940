"""
Meal history module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import CreateMealRequest, Meal, RateMealRequest


@runtime_checkable
class IMealRepository(Protocol):
    """Storage contract for meal history."""

    def create(self, user_id: str, request: CreateMealRequest) -> Meal: ...

    def get_by_id(self, meal_id: str) -> Optional[Meal]: ...

    def list_by_user(self, user_id: str, limit: int = 100) -> list[Meal]: ...

    def update_rating(
        self,
        meal_id: str,
        rating: Optional[int] = None,
        liked: Optional[bool] = None,
        notes: Optional[str] = None,
    ) -> Optional[Meal]: ...

    def delete(self, meal_id: str) -> bool: ...

    def cleanup_old_meals(self, user_id: str, keep_count: int = 100) -> int: ...


@runtime_checkable
class IMealService(Protocol):
    """Interface for meal history operations."""

    async def log_meal(self, user_id: str, request: CreateMealRequest) -> Meal:
        """Record a meal and trim the user's history to the configured size."""
        ...

    async def list_meals(self, user_id: str, limit: int = 100) -> list[Meal]:
        """List meals, most recent date first."""
        ...

    async def get_recent_meals(self, user_id: str, count: int = 10) -> list[Meal]:
        """The ``count`` most recent meals, most recent date first."""
        ...

    async def rate_meal(self, user_id: str, meal_id: str, request: RateMealRequest) -> Meal:
        """
        Update rating, liked flag and notes.

        Raises:
            MealNotFoundError: If the meal is missing or owned by someone else
        """
        ...

    async def delete_meal(self, user_id: str, meal_id: str) -> None:
        """
        Delete a meal.

        Raises:
            MealNotFoundError: If the meal is missing or owned by someone else
        """
        ...

    async def cleanup_old_meals(self, user_id: str, keep_count: Optional[int] = None) -> int:
        """Delete meals beyond the most recent ``keep_count``; return how many."""
        ...
