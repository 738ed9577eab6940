"""
User repository for database access.

Encapsulates all Supabase queries for the users table.
"""

from datetime import datetime
from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from .models import UserRecord
from .exceptions import EmailAlreadyRegisteredError


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user identity records.

    Email uniqueness is enforced by a unique constraint on users.email;
    a violation is reported as EmailAlreadyRegisteredError.
    """

    def create_user(self, email: str, password_hash: str) -> UserRecord:
        """
        Insert a new user.

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken
        """
        data = {
            "email": email,
            "password_hash": password_hash,
            "created_at": self._now().isoformat(),
        }
        try:
            result = self._db.table("users").insert(data).execute()
        except APIError as e:
            if self._is_unique_violation(e):
                raise EmailAlreadyRegisteredError(email) from e
            raise
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        result = self._db.table("users").select("*").eq("email", email).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        try:
            result = self._db.table("users").select("*").eq("id", user_id).limit(1).execute()
        except APIError as e:
            if self._is_invalid_input(e):
                return None
            raise
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def update_last_login(self, user_id: str, when: Optional[datetime] = None) -> None:
        when = when or self._now()
        self._db.table("users").update(
            {"last_login": when.isoformat()}
        ).eq("id", user_id).execute()

    def get_last_active(self, user_id: str) -> Optional[datetime]:
        result = self._db.table("users").select("last_active").eq("id", user_id).limit(1).execute()
        if not result.data:
            return None
        return self._parse_timestamp(result.data[0].get("last_active"))

    def update_last_active(self, user_id: str, when: Optional[datetime] = None) -> None:
        when = when or self._now()
        self._db.table("users").update(
            {"last_active": when.isoformat()}
        ).eq("id", user_id).execute()

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        return UserRecord(
            id=str(data["id"]),
            email=data["email"],
            password_hash=data["password_hash"],
            created_at=self._parse_timestamp(data["created_at"]),
            last_login=self._parse_timestamp(data.get("last_login")),
            last_active=self._parse_timestamp(data.get("last_active")),
        )
