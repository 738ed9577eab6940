"""
Meal suggestion endpoint.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_suggestion_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import ISuggestionService
from .models import SuggestMealsRequest, SuggestMealsResponse

router = APIRouter()


@router.post("/suggest", response_model=SuggestMealsResponse)
async def suggest_meals(
    request: SuggestMealsRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISuggestionService = Depends(get_suggestion_service),
) -> SuggestMealsResponse:
    """
    Suggest meals from the given ingredients.

    Uses the user's recent meals and preferences; likes and dislikes
    inferred along the way are added to the user's preferences.
    Returns 502 if the suggestion model is unavailable.
    """
    suggestions = await service.suggest(user.id, request)
    return SuggestMealsResponse(suggestions=suggestions)
