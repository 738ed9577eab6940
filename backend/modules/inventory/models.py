"""
Pantry inventory data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class StorageLocation(str, Enum):
    PANTRY = "pantry"
    FRIDGE = "fridge"
    FREEZER = "freezer"


class InventoryItem(BaseModel):
    """An ingredient the user has on hand."""

    id: str
    user_id: str
    ingredient_name: str
    quantity: float = Field(..., ge=0)
    location: StorageLocation
    added_at: datetime
    expires_at: Optional[datetime] = None

    def expires_between(self, start: datetime, end: datetime) -> bool:
        return self.expires_at is not None and start <= self.expires_at <= end


class AddInventoryItemRequest(BaseModel):
    """Body for adding an ingredient to the inventory."""

    ingredient_name: str = Field(..., min_length=1, max_length=200)
    quantity: float = Field(1, ge=0)
    location: StorageLocation = StorageLocation.PANTRY
    expires_at: Optional[datetime] = None


class UpdateQuantityRequest(BaseModel):
    quantity: float = Field(..., ge=0)


class InventoryListResponse(BaseModel):
    success: bool = True
    items: list[InventoryItem]
    count: int


class PantrySnapshot(BaseModel):
    """Ingredient names on hand, and the subset that expires soon."""

    ingredients: list[str] = Field(default_factory=list)
    expiring_soon: list[str] = Field(default_factory=list)
