"""
Preference ledger service.

Keeps each user's liked and disliked items deduplicated and bounded.
Explicit edits replace whole lists; merges (from user actions or from
suggestion feedback) append with set semantics.
"""

import logging
from typing import Optional

from .interfaces import IPreferenceRepository, IPreferenceService
from .ledger import DEFAULT_CAP, merge_bounded, normalize_items
from .models import CaloriePreference, PreferenceKind, PreferenceRecord

logger = logging.getLogger(__name__)


class PreferenceService(IPreferenceService):
    """Implements IPreferenceService on top of a preference repository."""

    def __init__(self, repository: IPreferenceRepository, cap: int = DEFAULT_CAP):
        self._repository = repository
        self._cap = cap

    async def get(self, user_id: str) -> Optional[PreferenceRecord]:
        return self._repository.get(user_id)

    async def upsert_explicit(
        self,
        user_id: str,
        likes: Optional[list[str]] = None,
        dislikes: Optional[list[str]] = None,
        calorie_preference: Optional[CaloriePreference] = None,
    ) -> PreferenceRecord:
        """Replace the provided fields; lists are deduplicated and capped."""
        return self._repository.upsert(
            user_id,
            likes=self._bounded(likes),
            dislikes=self._bounded(dislikes),
            calorie_preference=calorie_preference,
        )

    async def merge_likes(self, user_id: str, items: list[str]) -> list[str]:
        return self._merge(user_id, PreferenceKind.LIKE, items)

    async def merge_dislikes(self, user_id: str, items: list[str]) -> list[str]:
        return self._merge(user_id, PreferenceKind.DISLIKE, items)

    async def remove_item(self, user_id: str, kind: PreferenceKind, item: str) -> bool:
        removed = self._repository.remove_item(user_id, kind, item)
        if removed:
            logger.debug(f"Removed {kind.value} '{item}' for user {user_id}")
        return removed

    def _merge(self, user_id: str, kind: PreferenceKind, items: list[str]) -> list[str]:
        cleaned = normalize_items(items)
        if not cleaned:
            record = self._repository.get(user_id)
            if record is None:
                return []
            return list(getattr(record, kind.field))
        return self._repository.merge_items(user_id, kind, cleaned, self._cap)

    def _bounded(self, items: Optional[list[str]]) -> Optional[list[str]]:
        if items is None:
            return None
        return merge_bounded([], items, self._cap)
