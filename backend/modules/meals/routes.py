"""
Meal history API endpoints.

The suggestion endpoint (POST /meals/suggest) lives in the suggestions
module and is mounted under the same prefix.
"""

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_meal_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IMealService
from .models import CreateMealRequest, Meal, MealListResponse, RateMealRequest

router = APIRouter()


@router.post("", response_model=Meal, status_code=201)
async def log_meal(
    request: CreateMealRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMealService = Depends(get_meal_service),
) -> Meal:
    """Log a meal to the current user's history."""
    return await service.log_meal(user.id, request)


@router.get("", response_model=MealListResponse)
async def list_meals(
    limit: int = Query(default=100, ge=1, le=100, description="Maximum meals to return"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMealService = Depends(get_meal_service),
) -> MealListResponse:
    """List the current user's meals, most recent first."""
    meals = await service.list_meals(user.id, limit)
    return MealListResponse(meals=meals, count=len(meals))


@router.patch("/{meal_id}/rating", response_model=Meal)
async def rate_meal(
    meal_id: str,
    request: RateMealRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMealService = Depends(get_meal_service),
) -> Meal:
    """Rate a meal, mark it liked/disliked, or attach notes."""
    return await service.rate_meal(user.id, meal_id, request)


@router.delete("/{meal_id}", status_code=204)
async def delete_meal(
    meal_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMealService = Depends(get_meal_service),
) -> None:
    """Delete a meal from the current user's history."""
    await service.delete_meal(user.id, meal_id)
