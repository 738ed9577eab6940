"""
Pantry inventory service.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from .exceptions import InventoryItemNotFoundError
from .interfaces import IInventoryRepository, IInventoryService
from .models import AddInventoryItemRequest, InventoryItem, PantrySnapshot

logger = logging.getLogger(__name__)


class InventoryService(IInventoryService):
    """
    Inventory backed by an inventory repository.

    "Expiring soon" means an expiry between now and ``expiring_days``
    days from now; items past their expiry are not included.
    """

    def __init__(self, repository: IInventoryRepository, expiring_days: int = 3):
        self._repository = repository
        self._expiring_days = expiring_days

    async def add_item(self, user_id: str, request: AddInventoryItemRequest) -> InventoryItem:
        item = self._repository.add(user_id, request)
        logger.debug(f"Added {item.ingredient_name} to inventory of user {user_id}")
        return item

    async def list_items(self, user_id: str) -> list[InventoryItem]:
        return self._repository.list_by_user(user_id)

    async def get_expiring_soon(self, user_id: str, days_ahead: Optional[int] = None) -> list[InventoryItem]:
        start, end = self._expiry_window(days_ahead)
        return self._repository.list_expiring(user_id, start, end)

    async def get_snapshot(self, user_id: str) -> PantrySnapshot:
        items = self._repository.list_by_user(user_id)
        start, end = self._expiry_window()
        expiring = sorted(
            (item for item in items if item.expires_between(start, end)),
            key=lambda item: item.expires_at,
        )
        return PantrySnapshot(
            ingredients=list(dict.fromkeys(item.ingredient_name for item in items)),
            expiring_soon=list(dict.fromkeys(item.ingredient_name for item in expiring)),
        )

    async def update_quantity(self, user_id: str, item_id: str, quantity: float) -> InventoryItem:
        self._get_owned(user_id, item_id)
        updated = self._repository.update_quantity(item_id, quantity)
        if updated is None:
            raise InventoryItemNotFoundError(item_id)
        return updated

    async def remove_item(self, user_id: str, item_id: str) -> None:
        self._get_owned(user_id, item_id)
        if not self._repository.delete(item_id):
            raise InventoryItemNotFoundError(item_id)

    def _expiry_window(self, days_ahead: Optional[int] = None) -> tuple[datetime, datetime]:
        now = datetime.now(timezone.utc)
        days = self._expiring_days if days_ahead is None else days_ahead
        return now, now + timedelta(days=days)

    def _get_owned(self, user_id: str, item_id: str) -> InventoryItem:
        item = self._repository.get_by_id(item_id)
        if item is None or item.user_id != user_id:
            raise InventoryItemNotFoundError(item_id)
        return item
