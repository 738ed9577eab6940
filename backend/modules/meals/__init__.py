"""
Meal history module.

Public API:
- IMealService: Interface for meal history operations
- Meal, CreateMealRequest, RateMealRequest: Data models
- MealNotFoundError
"""

from .interfaces import IMealService, IMealRepository
from .models import Meal, CreateMealRequest, RateMealRequest, MealListResponse
from .exceptions import MealNotFoundError

__all__ = [
    "IMealService",
    "IMealRepository",
    "Meal",
    "CreateMealRequest",
    "RateMealRequest",
    "MealListResponse",
    "MealNotFoundError",
]
