"""
Meal repository for database access.

Encapsulates all Supabase queries for the meals table.
"""

from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from .models import CreateMealRequest, Meal


class MealRepository(BaseRepository[Meal]):
    """
    Repository for meal history records.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying user ownership.
    """

    CLEANUP_BATCH_SIZE = 500

    def create(self, user_id: str, request: CreateMealRequest) -> Meal:
        now = self._now()
        data = {
            "user_id": user_id,
            "meal_name": request.meal_name,
            "ingredients": request.ingredients,
            "date": (request.date or now).isoformat(),
            "rating": request.rating,
            "liked": request.liked,
            "notes": request.notes,
            "estimated_calories": request.estimated_calories,
            "ai_suggestion": request.ai_suggestion,
            "created_at": now.isoformat(),
        }
        result = self._db.table("meals").insert(data).execute()
        return self._map_to_meal(result.data[0])

    def get_by_id(self, meal_id: str) -> Optional[Meal]:
        try:
            result = self._db.table("meals").select("*").eq("id", meal_id).limit(1).execute()
        except APIError as e:
            # Not a UUID, so no such meal
            if self._is_invalid_input(e):
                return None
            raise
        if not result.data:
            return None
        return self._map_to_meal(result.data[0])

    def list_by_user(self, user_id: str, limit: int = 100) -> list[Meal]:
        """Meals for a user, most recent date first, then most recently logged."""
        result = (
            self._db.table("meals")
            .select("*")
            .eq("user_id", user_id)
            .order("date", desc=True)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [self._map_to_meal(m) for m in result.data]

    def update_rating(
        self,
        meal_id: str,
        rating: Optional[int] = None,
        liked: Optional[bool] = None,
        notes: Optional[str] = None,
    ) -> Optional[Meal]:
        data: dict[str, Any] = {}
        if rating is not None:
            data["rating"] = rating
        if liked is not None:
            data["liked"] = liked
        if notes is not None:
            data["notes"] = notes
        if not data:
            return self.get_by_id(meal_id)

        result = self._db.table("meals").update(data).eq("id", meal_id).execute()
        if not result.data:
            return None
        return self._map_to_meal(result.data[0])

    def delete(self, meal_id: str) -> bool:
        result = self._db.table("meals").delete().eq("id", meal_id).execute()
        return bool(result.data)

    def cleanup_old_meals(self, user_id: str, keep_count: int = 100) -> int:
        """
        Delete everything after the user's ``keep_count`` most recent meals.

        Meals are ranked by date, then by creation time, so meals logged
        for the same date keep a stable order and exactly ``keep_count``
        remain. Ids are deleted in batches of CLEANUP_BATCH_SIZE.

        Returns:
            Number of deleted meals
        """
        deleted = 0
        while True:
            result = (
                self._db.table("meals")
                .select("id")
                .eq("user_id", user_id)
                .order("date", desc=True)
                .order("created_at", desc=True)
                .range(keep_count, keep_count + self.CLEANUP_BATCH_SIZE - 1)
                .execute()
            )
            ids = [row["id"] for row in result.data or []]
            if not ids:
                return deleted

            removed = (
                self._db.table("meals")
                .delete()
                .eq("user_id", user_id)
                .in_("id", ids)
                .execute()
            )
            deleted += len(removed.data or [])
            # A short page is the last one
            if len(ids) < self.CLEANUP_BATCH_SIZE or not removed.data:
                return deleted

    def _map_to_meal(self, data: dict[str, Any]) -> Meal:
        return Meal(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            meal_name=data["meal_name"],
            ingredients=list(data.get("ingredients") or []),
            date=self._parse_timestamp(data["date"]),
            rating=data.get("rating"),
            liked=data.get("liked"),
            notes=data.get("notes"),
            estimated_calories=data.get("estimated_calories"),
            ai_suggestion=bool(data.get("ai_suggestion", False)),
            created_at=self._parse_timestamp(data["created_at"]),
        )
