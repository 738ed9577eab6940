"""
Preference module interface.

The suggestion orchestrator and the API layer depend on
IPreferenceService; IPreferenceRepository is the storage contract.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import CaloriePreference, PreferenceKind, PreferenceRecord


@runtime_checkable
class IPreferenceRepository(Protocol):
    """
    Storage contract for preference records.

    Each method must be atomic for a single user's record.
    """

    def get(self, user_id: str) -> Optional[PreferenceRecord]: ...

    def upsert(
        self,
        user_id: str,
        likes: Optional[list[str]] = None,
        dislikes: Optional[list[str]] = None,
        calorie_preference: Optional[CaloriePreference] = None,
    ) -> PreferenceRecord: ...

    def merge_items(
        self,
        user_id: str,
        kind: PreferenceKind,
        items: list[str],
        cap: int,
    ) -> list[str]: ...

    def remove_item(self, user_id: str, kind: PreferenceKind, item: str) -> bool: ...


@runtime_checkable
class IPreferenceService(Protocol):
    """
    Interface for the preference ledger.

    Lists never hold duplicates and never exceed the configured cap.
    """

    async def get(self, user_id: str) -> Optional[PreferenceRecord]:
        """Get the user's preference record, or None if never written."""
        ...

    async def upsert_explicit(
        self,
        user_id: str,
        likes: Optional[list[str]] = None,
        dislikes: Optional[list[str]] = None,
        calorie_preference: Optional[CaloriePreference] = None,
    ) -> PreferenceRecord:
        """
        Create or update the record.

        Provided fields replace stored values; omitted fields are left
        untouched (or empty on creation).
        """
        ...

    async def merge_likes(self, user_id: str, items: list[str]) -> list[str]:
        """Add liked items with set semantics and trim to the cap."""
        ...

    async def merge_dislikes(self, user_id: str, items: list[str]) -> list[str]:
        """Add disliked items with set semantics and trim to the cap."""
        ...

    async def remove_item(self, user_id: str, kind: PreferenceKind, item: str) -> bool:
        """Remove an exact-match item; return whether it was present."""
        ...
