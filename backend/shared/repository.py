"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from datetime import datetime, timezone
from typing import Any, Optional, TypeVar, Generic
from supabase import Client


T = TypeVar("T")

# Postgres SQLSTATEs
UNIQUE_VIOLATION = "23505"
INVALID_TEXT_REPRESENTATION = "22P02"  # e.g. a malformed UUID


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class MealRepository(BaseRepository[Meal]):
            def get_by_id(self, meal_id: str) -> Optional[Meal]:
                result = self._db.table("meals").select("*").eq("id", meal_id).execute()
                if not result.data:
                    return None
                return self._map_to_meal(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    @staticmethod
    def _parse_timestamp(value: Any) -> Optional[datetime]:
        """Parse an ISO timestamp returned by PostgREST."""
        if value is None or isinstance(value, datetime):
            return value
        # PostgREST may return a trailing "Z"
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))

    @staticmethod
    def _is_unique_violation(error: Exception) -> bool:
        return getattr(error, "code", None) == UNIQUE_VIOLATION

    @staticmethod
    def _is_invalid_input(error: Exception) -> bool:
        return getattr(error, "code", None) == INVALID_TEXT_REPRESENTATION
