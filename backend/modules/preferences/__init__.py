"""
Preference ledger module.

Stores each user's liked and disliked items as bounded ordered sets,
plus an optional calorie class.

Public API:
- IPreferenceService: Interface for ledger operations
- merge_bounded: The ordered-set-with-cap merge rule
- PreferenceRecord, PreferenceKind, CaloriePreference: Data models
"""

from .interfaces import IPreferenceService, IPreferenceRepository
from .ledger import DEFAULT_CAP, merge_bounded, normalize_items
from .models import (
    CaloriePreference,
    PreferenceKind,
    PreferenceRecord,
    UpdatePreferencesRequest,
)
from .exceptions import PreferencesNotFoundError, PreferenceItemNotFoundError

__all__ = [
    "IPreferenceService",
    "IPreferenceRepository",
    "DEFAULT_CAP",
    "merge_bounded",
    "normalize_items",
    "CaloriePreference",
    "PreferenceKind",
    "PreferenceRecord",
    "UpdatePreferencesRequest",
    "PreferencesNotFoundError",
    "PreferenceItemNotFoundError",
]
