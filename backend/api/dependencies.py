"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

import threading
from datetime import timedelta
from typing import TYPE_CHECKING

from shared.background import BackgroundDispatcher
from shared.config import get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.inventory.interfaces import IInventoryService
    from modules.meals.interfaces import IMealService
    from modules.preferences.interfaces import IPreferenceService
    from modules.suggestions.interfaces import ISuggestionGenerator, ISuggestionService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._auth_service: "IAuthService | None" = None
        self._preference_service: "IPreferenceService | None" = None
        self._meal_service: "IMealService | None" = None
        self._inventory_service: "IInventoryService | None" = None
        self._suggestion_generator: "ISuggestionGenerator | None" = None
        self._suggestion_service: "ISuggestionService | None" = None
        self._background = BackgroundDispatcher()

    @property
    def background(self) -> BackgroundDispatcher:
        """Get the background task dispatcher."""
        return self._background

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.repository import UserRepository
            from modules.auth.service import AuthService
            from modules.auth.tokens import CredentialCodec
            from shared.database import get_supabase_client

            settings = get_settings()
            self._auth_service = AuthService(
                codec=CredentialCodec.from_settings(settings),
                users=UserRepository(get_supabase_client()),
                activity_throttle=timedelta(minutes=settings.activity_throttle_minutes),
            )
        return self._auth_service

    @property
    def preferences(self) -> "IPreferenceService":
        """Get the preference ledger service instance."""
        if self._preference_service is None:
            from modules.preferences.repository import PreferenceRepository
            from modules.preferences.service import PreferenceService
            from shared.database import get_supabase_client

            self._preference_service = PreferenceService(
                repository=PreferenceRepository(get_supabase_client()),
                cap=get_settings().preference_list_cap,
            )
        return self._preference_service

    @property
    def meals(self) -> "IMealService":
        """Get the meal history service instance."""
        if self._meal_service is None:
            from modules.meals.repository import MealRepository
            from modules.meals.service import MealService
            from shared.database import get_supabase_client

            self._meal_service = MealService(
                repository=MealRepository(get_supabase_client()),
                history_limit=get_settings().meal_history_limit,
            )
        return self._meal_service

    @property
    def inventory(self) -> "IInventoryService":
        """Get the pantry inventory service instance."""
        if self._inventory_service is None:
            from modules.inventory.repository import InventoryRepository
            from modules.inventory.service import InventoryService
            from shared.database import get_supabase_client

            self._inventory_service = InventoryService(
                repository=InventoryRepository(get_supabase_client()),
                expiring_days=get_settings().expiring_soon_days,
            )
        return self._inventory_service

    @property
    def suggestion_generator(self) -> "ISuggestionGenerator":
        """Get the generative suggestion backend."""
        if self._suggestion_generator is None:
            from modules.suggestions.generator import GeminiSuggestionGenerator

            self._suggestion_generator = GeminiSuggestionGenerator.from_settings(get_settings())
        return self._suggestion_generator

    @property
    def suggestions(self) -> "ISuggestionService":
        """Get the suggestion orchestrator instance."""
        if self._suggestion_service is None:
            from modules.suggestions.service import SuggestionService

            self._suggestion_service = SuggestionService(
                generator=self.suggestion_generator,
                preferences=self.preferences,
                meals=self.meals,
                inventory=self.inventory,
                recent_meal_count=get_settings().recent_meal_count,
            )
        return self._suggestion_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_service = None
        self._preference_service = None
        self._meal_service = None
        self._inventory_service = None
        self._suggestion_generator = None
        self._suggestion_service = None
        self._background = BackgroundDispatcher()


# Module-level container singleton
_container: ServiceContainer | None = None
_container_lock = threading.Lock()


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        with _container_lock:
            if _container is None:
                _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    with _container_lock:
        _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_preference_service() -> "IPreferenceService":
    """FastAPI dependency for preference service."""
    return get_container().preferences


def get_meal_service() -> "IMealService":
    """FastAPI dependency for meal service."""
    return get_container().meals


def get_inventory_service() -> "IInventoryService":
    """FastAPI dependency for inventory service."""
    return get_container().inventory


def get_suggestion_service() -> "ISuggestionService":
    """FastAPI dependency for suggestion service."""
    return get_container().suggestions


def get_background_dispatcher() -> BackgroundDispatcher:
    """FastAPI dependency for the background task dispatcher."""
    return get_container().background
