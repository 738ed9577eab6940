"""
Preference API endpoints.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from api.dependencies import get_preference_service
from api.middleware.auth import get_current_user
from api.models.errors import SuccessResponse
from shared.models import AuthenticatedUser

from .exceptions import PreferenceItemNotFoundError, PreferencesNotFoundError
from .interfaces import IPreferenceService
from .models import PreferenceKind, PreferencesResponse, UpdatePreferencesRequest

router = APIRouter()


class AddItemsRequest(BaseModel):
    items: list[str] = Field(..., min_length=1)


class PreferenceListResponse(BaseModel):
    success: bool = True
    kind: PreferenceKind
    items: list[str]


@router.get("", response_model=PreferencesResponse)
async def get_preferences(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPreferenceService = Depends(get_preference_service),
) -> PreferencesResponse:
    """Get the current user's likes, dislikes and calorie preference."""
    record = await service.get(user.id)
    if record is None:
        raise PreferencesNotFoundError(user.id)
    return PreferencesResponse(preferences=record)


@router.put("", response_model=PreferencesResponse)
async def update_preferences(
    request: UpdatePreferencesRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPreferenceService = Depends(get_preference_service),
) -> PreferencesResponse:
    """
    Create or update preferences.

    Lists sent in the body replace the stored lists; omitted fields are kept.
    """
    record = await service.upsert_explicit(
        user.id,
        likes=request.likes,
        dislikes=request.dislikes,
        calorie_preference=request.calorie_preference,
    )
    return PreferencesResponse(preferences=record)


@router.post("/{kind}", response_model=PreferenceListResponse)
async def add_preference_items(
    kind: PreferenceKind,
    request: AddItemsRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPreferenceService = Depends(get_preference_service),
) -> PreferenceListResponse:
    """Add items to the likes or dislikes list, skipping ones already present."""
    if kind is PreferenceKind.LIKE:
        items = await service.merge_likes(user.id, request.items)
    else:
        items = await service.merge_dislikes(user.id, request.items)
    return PreferenceListResponse(kind=kind, items=items)


@router.delete("/{kind}/{item}", response_model=SuccessResponse)
async def remove_preference_item(
    kind: PreferenceKind,
    item: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPreferenceService = Depends(get_preference_service),
) -> SuccessResponse:
    """Remove one item from the likes or dislikes list."""
    if not await service.remove_item(user.id, kind, item):
        raise PreferenceItemNotFoundError(kind.value, item)
    return SuccessResponse()
