"""
Pantry inventory module.

Public API:
- IInventoryService: Interface for inventory operations
- InventoryItem, AddInventoryItemRequest, PantrySnapshot: Data models
- InventoryItemNotFoundError
"""

from .interfaces import IInventoryService, IInventoryRepository
from .models import (
    StorageLocation,
    InventoryItem,
    AddInventoryItemRequest,
    UpdateQuantityRequest,
    InventoryListResponse,
    PantrySnapshot,
)
from .exceptions import InventoryItemNotFoundError

__all__ = [
    "IInventoryService",
    "IInventoryRepository",
    "StorageLocation",
    "InventoryItem",
    "AddInventoryItemRequest",
    "UpdateQuantityRequest",
    "InventoryListResponse",
    "PantrySnapshot",
    "InventoryItemNotFoundError",
]
