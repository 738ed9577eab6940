"""
Pantry inventory module exceptions.
"""

from shared.exceptions import NotFoundError


class InventoryItemNotFoundError(NotFoundError):
    """Raised when an inventory item does not exist or belongs to another user."""

    def __init__(self, item_id: str):
        super().__init__(
            f"Inventory item not found: {item_id}",
            code="INVENTORY_ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )
