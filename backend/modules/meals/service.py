"""
Meal history service.
"""

import logging
from typing import Optional

from .exceptions import MealNotFoundError
from .interfaces import IMealRepository, IMealService
from .models import CreateMealRequest, Meal, RateMealRequest

logger = logging.getLogger(__name__)


class MealService(IMealService):
    """
    Meal history backed by a meal repository.

    Every logged meal is followed by a history cleanup so a user never
    keeps more than ``history_limit`` meals.
    """

    def __init__(self, repository: IMealRepository, history_limit: int = 100):
        self._repository = repository
        self._history_limit = history_limit

    async def log_meal(self, user_id: str, request: CreateMealRequest) -> Meal:
        meal = self._repository.create(user_id, request)

        try:
            deleted = self._repository.cleanup_old_meals(user_id, self._history_limit)
            if deleted:
                logger.info(f"Cleaned up {deleted} old meals for user {user_id}")
        except Exception as e:
            # The meal is saved; cleanup runs again on the next insert
            logger.warning(f"Meal history cleanup failed for user {user_id}: {e}")

        return meal

    async def list_meals(self, user_id: str, limit: int = 100) -> list[Meal]:
        return self._repository.list_by_user(user_id, limit)

    async def get_recent_meals(self, user_id: str, count: int = 10) -> list[Meal]:
        return self._repository.list_by_user(user_id, count)

    async def rate_meal(self, user_id: str, meal_id: str, request: RateMealRequest) -> Meal:
        self._get_owned(user_id, meal_id)
        updated = self._repository.update_rating(
            meal_id,
            rating=request.rating,
            liked=request.liked,
            notes=request.notes,
        )
        if updated is None:
            raise MealNotFoundError(meal_id)
        return updated

    async def delete_meal(self, user_id: str, meal_id: str) -> None:
        self._get_owned(user_id, meal_id)
        if not self._repository.delete(meal_id):
            raise MealNotFoundError(meal_id)

    async def cleanup_old_meals(self, user_id: str, keep_count: Optional[int] = None) -> int:
        return self._repository.cleanup_old_meals(
            user_id,
            keep_count if keep_count is not None else self._history_limit,
        )

    def _get_owned(self, user_id: str, meal_id: str) -> Meal:
        meal = self._repository.get_by_id(meal_id)
        # Another user's meal is reported exactly like a missing one
        if meal is None or meal.user_id != user_id:
            raise MealNotFoundError(meal_id)
        return meal
