"""
Preference module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class CaloriePreference(str, Enum):
    """Calorie class of a meal."""

    LOW = "low"        # under 400 kcal
    MEDIUM = "medium"  # 400-700 kcal
    HIGH = "high"      # over 700 kcal


class PreferenceKind(str, Enum):
    """Which preference list an item belongs to."""

    LIKE = "like"
    DISLIKE = "dislike"

    @property
    def field(self) -> str:
        """Column name of the list."""
        return "likes" if self is PreferenceKind.LIKE else "dislikes"


class PreferenceRecord(BaseModel):
    """A user's liked/disliked items and calorie target."""

    user_id: str
    likes: list[str] = Field(default_factory=list, description="Oldest first")
    dislikes: list[str] = Field(default_factory=list, description="Oldest first")
    calorie_preference: Optional[CaloriePreference] = None
    updated_at: datetime


class UpdatePreferencesRequest(BaseModel):
    """
    Explicit preference edit.

    Provided lists replace the stored ones; omitted fields are unchanged.
    """

    likes: Optional[list[str]] = None
    dislikes: Optional[list[str]] = None
    calorie_preference: Optional[CaloriePreference] = None


class PreferencesResponse(BaseModel):
    success: bool = True
    preferences: PreferenceRecord
