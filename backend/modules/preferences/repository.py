"""
Preference repository for database access.

Encapsulates all Supabase queries for the user_preferences table.
List merges and removals go through Postgres functions so each one is a
single atomic statement on the user's row.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import CaloriePreference, PreferenceKind, PreferenceRecord


class PreferenceRepository(BaseRepository[PreferenceRecord]):
    """
    Repository for preference records (one row per user).

    Note: callers pass already-normalised lists to upsert(); merge_items()
    applies the dedup and cap rule server-side.
    """

    def get(self, user_id: str) -> Optional[PreferenceRecord]:
        result = (
            self._db.table("user_preferences")
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_record(result.data[0])

    def upsert(
        self,
        user_id: str,
        likes: Optional[list[str]] = None,
        dislikes: Optional[list[str]] = None,
        calorie_preference: Optional[CaloriePreference] = None,
    ) -> PreferenceRecord:
        """
        Insert or update the user's row.

        Only the columns present in the payload are written on conflict;
        on insert the table defaults fill the rest (empty lists).
        """
        data: dict[str, Any] = {
            "user_id": user_id,
            "updated_at": self._now().isoformat(),
        }
        if likes is not None:
            data["likes"] = likes
        if dislikes is not None:
            data["dislikes"] = dislikes
        if calorie_preference is not None:
            data["calorie_preference"] = calorie_preference.value

        result = (
            self._db.table("user_preferences")
            .upsert(data, on_conflict="user_id")
            .execute()
        )
        return self._map_to_record(result.data[0])

    def merge_items(
        self,
        user_id: str,
        kind: PreferenceKind,
        items: list[str],
        cap: int,
    ) -> list[str]:
        """
        Append items to a list with set semantics, trimming to ``cap``.

        Creates the row if it does not exist yet.

        Returns:
            The resulting list, oldest first
        """
        result = self._db.rpc("merge_preference_items", {
            "p_user_id": user_id,
            "p_field": kind.field,
            "p_items": items,
            "p_cap": cap,
        }).execute()
        return list(result.data or [])

    def remove_item(self, user_id: str, kind: PreferenceKind, item: str) -> bool:
        """Remove an exact-match item; True if something was removed."""
        result = self._db.rpc("remove_preference_item", {
            "p_user_id": user_id,
            "p_field": kind.field,
            "p_item": item,
        }).execute()
        return bool(result.data)

    def _map_to_record(self, data: dict[str, Any]) -> PreferenceRecord:
        calorie = data.get("calorie_preference")
        return PreferenceRecord(
            user_id=str(data["user_id"]),
            likes=list(data.get("likes") or []),
            dislikes=list(data.get("dislikes") or []),
            calorie_preference=CaloriePreference(calorie) if calorie else None,
            updated_at=self._parse_timestamp(data["updated_at"]),
        )
