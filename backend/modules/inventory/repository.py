"""
Inventory repository for database access.

Encapsulates all Supabase queries for the inventory_items table.
"""

from datetime import datetime
from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from .models import AddInventoryItemRequest, InventoryItem


class InventoryRepository(BaseRepository[InventoryItem]):
    """
    Repository for pantry inventory items.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying user ownership.
    """

    def add(self, user_id: str, request: AddInventoryItemRequest) -> InventoryItem:
        data = {
            "user_id": user_id,
            "ingredient_name": request.ingredient_name,
            "quantity": request.quantity,
            "location": request.location.value,
            "added_at": self._now().isoformat(),
            "expires_at": request.expires_at.isoformat() if request.expires_at else None,
        }
        result = self._db.table("inventory_items").insert(data).execute()
        return self._map_to_item(result.data[0])

    def get_by_id(self, item_id: str) -> Optional[InventoryItem]:
        try:
            result = self._db.table("inventory_items").select("*").eq("id", item_id).limit(1).execute()
        except APIError as e:
            if self._is_invalid_input(e):
                return None
            raise
        if not result.data:
            return None
        return self._map_to_item(result.data[0])

    def list_by_user(self, user_id: str) -> list[InventoryItem]:
        result = (
            self._db.table("inventory_items")
            .select("*")
            .eq("user_id", user_id)
            .order("added_at")
            .execute()
        )
        return [self._map_to_item(row) for row in result.data]

    def list_expiring(self, user_id: str, start: datetime, end: datetime) -> list[InventoryItem]:
        """Items whose expiry falls within [start, end], soonest first."""
        result = (
            self._db.table("inventory_items")
            .select("*")
            .eq("user_id", user_id)
            .gte("expires_at", start.isoformat())
            .lte("expires_at", end.isoformat())
            .order("expires_at")
            .execute()
        )
        return [self._map_to_item(row) for row in result.data]

    def update_quantity(self, item_id: str, quantity: float) -> Optional[InventoryItem]:
        result = (
            self._db.table("inventory_items")
            .update({"quantity": quantity})
            .eq("id", item_id)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_item(result.data[0])

    def delete(self, item_id: str) -> bool:
        result = self._db.table("inventory_items").delete().eq("id", item_id).execute()
        return bool(result.data)

    def _map_to_item(self, data: dict[str, Any]) -> InventoryItem:
        return InventoryItem(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            ingredient_name=data["ingredient_name"],
            quantity=float(data.get("quantity") or 0),
            location=data["location"],
            added_at=self._parse_timestamp(data["added_at"]),
            expires_at=self._parse_timestamp(data.get("expires_at")),
        )
