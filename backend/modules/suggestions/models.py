"""
Suggestion module data models.

SuggestionResult doubles as the JSON schema handed to the model, so its
field descriptions are written for the model as much as for readers.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from modules.preferences.models import CaloriePreference


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class AvailableIngredients(BaseModel):
    """Ingredients on hand, split by storage location."""

    pantry: list[str] = Field(..., description="Shelf-stable ingredients")
    fridge: list[str] = Field(..., description="Perishable ingredients")

    def flattened(self) -> list[str]:
        return list(dict.fromkeys([*self.pantry, *self.fridge]))


class SuggestMealsRequest(BaseModel):
    """Body of POST /meals/suggest."""

    ingredients: AvailableIngredients
    expiring_soon: list[str] = Field(
        default_factory=list,
        description="Ingredients that should be used first",
    )
    calorie_preference: Optional[CaloriePreference] = Field(
        None,
        description="Overrides (and updates) the stored calorie preference",
    )


class MealSummary(BaseModel):
    """A past meal as shown to the model."""

    meal_name: str
    date: datetime
    rating: Optional[int] = None
    liked: Optional[bool] = None
    notes: Optional[str] = None


class SuggestionPrompt(BaseModel):
    """Structured payload sent to the suggestion generator."""

    ingredients: list[str]
    expiring_soon: list[str] = Field(default_factory=list)
    likes: list[str] = Field(default_factory=list)
    dislikes: list[str] = Field(default_factory=list)
    calorie_target: str = "unspecified"
    recent_meals: list[MealSummary] = Field(default_factory=list)


class MealSuggestion(BaseModel):
    name: str = Field(..., description="Meal name")
    description: str = Field(..., description="One or two sentence description")
    ingredients: list[str] = Field(..., description="Main ingredients needed")
    estimated_time_minutes: int = Field(..., ge=0, description="Total preparation and cooking time in minutes")
    difficulty: Difficulty = Field(..., description="easy, medium or hard")
    estimated_calories: int = Field(..., ge=0, description="Estimated calories per serving")
    uses_expiring: list[str] = Field(
        default_factory=list,
        description="Which of the expiring-soon ingredients this meal uses",
    )


class SuggestionResult(BaseModel):
    """Structured response of the suggestion generator."""

    suggestions: list[MealSuggestion] = Field(..., min_length=1, description="Meal suggestions")
    new_likes: list[str] = Field(
        default_factory=list,
        description="Foods or ingredients the user seems to like, inferred from their history",
    )
    new_dislikes: list[str] = Field(
        default_factory=list,
        description="Foods or ingredients the user seems to dislike, inferred from their history",
    )


class SuggestMealsResponse(BaseModel):
    success: bool = True
    suggestions: list[MealSuggestion]
