"""
Pantry inventory API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_inventory_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IInventoryService
from .models import (
    AddInventoryItemRequest,
    InventoryItem,
    InventoryListResponse,
    UpdateQuantityRequest,
)

router = APIRouter()


@router.get("", response_model=InventoryListResponse)
async def list_items(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IInventoryService = Depends(get_inventory_service),
) -> InventoryListResponse:
    """List everything in the current user's inventory."""
    items = await service.list_items(user.id)
    return InventoryListResponse(items=items, count=len(items))


@router.post("", response_model=InventoryItem, status_code=201)
async def add_item(
    request: AddInventoryItemRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IInventoryService = Depends(get_inventory_service),
) -> InventoryItem:
    """Add an ingredient to the current user's inventory."""
    return await service.add_item(user.id, request)


@router.get("/expiring", response_model=InventoryListResponse)
async def expiring_soon(
    days: Optional[int] = Query(default=None, ge=0, le=30, description="How many days ahead to look"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IInventoryService = Depends(get_inventory_service),
) -> InventoryListResponse:
    """Items expiring within the next ``days`` days, soonest first."""
    items = await service.get_expiring_soon(user.id, days)
    return InventoryListResponse(items=items, count=len(items))


@router.patch("/{item_id}", response_model=InventoryItem)
async def update_quantity(
    item_id: str,
    request: UpdateQuantityRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IInventoryService = Depends(get_inventory_service),
) -> InventoryItem:
    return await service.update_quantity(user.id, item_id, request.quantity)


@router.delete("/{item_id}", status_code=204)
async def remove_item(
    item_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IInventoryService = Depends(get_inventory_service),
) -> None:
    """Remove an item from the current user's inventory."""
    await service.remove_item(user.id, item_id)
