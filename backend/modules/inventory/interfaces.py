"""
Pantry inventory module interface.
"""

from datetime import datetime
from typing import Protocol, Optional, runtime_checkable

from .models import AddInventoryItemRequest, InventoryItem, PantrySnapshot


@runtime_checkable
class IInventoryRepository(Protocol):
    """Storage contract for inventory items."""

    def add(self, user_id: str, request: AddInventoryItemRequest) -> InventoryItem: ...

    def get_by_id(self, item_id: str) -> Optional[InventoryItem]: ...

    def list_by_user(self, user_id: str) -> list[InventoryItem]: ...

    def list_expiring(self, user_id: str, start: datetime, end: datetime) -> list[InventoryItem]: ...

    def update_quantity(self, item_id: str, quantity: float) -> Optional[InventoryItem]: ...

    def delete(self, item_id: str) -> bool: ...


@runtime_checkable
class IInventoryService(Protocol):
    """Interface for pantry inventory operations."""

    async def add_item(self, user_id: str, request: AddInventoryItemRequest) -> InventoryItem:
        ...

    async def list_items(self, user_id: str) -> list[InventoryItem]:
        """All items, in the order they were added."""
        ...

    async def get_expiring_soon(self, user_id: str, days_ahead: Optional[int] = None) -> list[InventoryItem]:
        """
        Items expiring between now and ``days_ahead`` days from now,
        soonest first. Already expired items are excluded.
        """
        ...

    async def get_snapshot(self, user_id: str) -> PantrySnapshot:
        """Names of every stored ingredient plus the expiring-soon subset."""
        ...

    async def update_quantity(self, user_id: str, item_id: str, quantity: float) -> InventoryItem:
        """
        Raises:
            InventoryItemNotFoundError: If the item is missing or owned by someone else
        """
        ...

    async def remove_item(self, user_id: str, item_id: str) -> None:
        """
        Raises:
            InventoryItemNotFoundError: If the item is missing or owned by someone else
        """
        ...
