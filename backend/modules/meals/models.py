"""
Meal history data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class Meal(BaseModel):
    """A meal the user ate (or plans to eat)."""

    id: str
    user_id: str
    meal_name: str
    ingredients: list[str] = Field(default_factory=list)
    date: datetime
    rating: Optional[int] = Field(None, ge=1, le=5)
    liked: Optional[bool] = None
    notes: Optional[str] = None
    estimated_calories: Optional[int] = None
    ai_suggestion: bool = False
    created_at: datetime


class CreateMealRequest(BaseModel):
    """Body for logging a meal."""

    meal_name: str = Field(..., min_length=1, max_length=200)
    ingredients: list[str] = Field(default_factory=list)
    date: Optional[datetime] = Field(None, description="Defaults to now")
    rating: Optional[int] = Field(None, ge=1, le=5)
    liked: Optional[bool] = None
    notes: Optional[str] = Field(None, max_length=2000)
    estimated_calories: Optional[int] = Field(None, ge=0)
    ai_suggestion: bool = False


class RateMealRequest(BaseModel):
    """Body for rating a logged meal. Omitted fields are left unchanged."""

    rating: Optional[int] = Field(None, ge=1, le=5)
    liked: Optional[bool] = None
    notes: Optional[str] = Field(None, max_length=2000)


class MealListResponse(BaseModel):
    success: bool = True
    meals: list[Meal]
    count: int
