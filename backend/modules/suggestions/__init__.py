"""
Meal suggestion module.

Public API:
- ISuggestionService: The suggestion orchestrator interface
- ISuggestionGenerator: The generative backend interface
- SuggestMealsRequest, MealSuggestion, SuggestionResult: Data models
- SuggestionUnavailableError
"""

from .interfaces import ISuggestionGenerator, ISuggestionService
from .models import (
    AvailableIngredients,
    Difficulty,
    MealSuggestion,
    SuggestMealsRequest,
    SuggestionPrompt,
    SuggestionResult,
)
from .exceptions import SuggestionUnavailableError

__all__ = [
    "ISuggestionGenerator",
    "ISuggestionService",
    "AvailableIngredients",
    "Difficulty",
    "MealSuggestion",
    "SuggestMealsRequest",
    "SuggestionPrompt",
    "SuggestionResult",
    "SuggestionUnavailableError",
]
