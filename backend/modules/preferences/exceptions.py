"""
Preference module exceptions.
"""

from shared.exceptions import NotFoundError


class PreferencesNotFoundError(NotFoundError):
    """Raised when a user has no preference record yet."""

    def __init__(self, user_id: str):
        super().__init__(
            "No preferences saved yet",
            code="PREFERENCES_NOT_FOUND",
            details={"user_id": user_id},
        )


class PreferenceItemNotFoundError(NotFoundError):
    """Raised when removing an item that is not in the list."""

    def __init__(self, kind: str, item: str):
        super().__init__(
            f"'{item}' is not in your {kind}s",
            code="PREFERENCE_ITEM_NOT_FOUND",
            details={"kind": kind, "item": item},
        )
