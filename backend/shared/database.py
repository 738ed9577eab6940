"""
Database client factory for Supabase.

The backend talks to Supabase with a single service-role client per process.
The client is created on first use and shared by every repository.
"""

import logging
import threading
from typing import Optional
from supabase import create_client, Client

from .config import get_settings
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Module-level client cache
_service_client: Optional[Client] = None
_client_lock = threading.Lock()


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    The first caller creates the client; concurrent first callers wait on
    the lock and then observe the already-created instance.

    Returns:
        Supabase client configured with service role key

    Raises:
        ConfigurationError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    global _service_client

    client = _service_client
    if client is not None:
        return client

    with _client_lock:
        if _service_client is None:
            settings = get_settings()
            if not settings.supabase_url:
                raise ConfigurationError("SUPABASE_URL")
            if not settings.supabase_service_role_key:
                raise ConfigurationError("SUPABASE_SERVICE_ROLE_KEY")
            _service_client = create_client(
                settings.supabase_url,
                settings.supabase_service_role_key,
            )
            logger.info("Created Supabase service client")
        return _service_client


def is_database_configured() -> bool:
    """Whether the Supabase connection settings are present."""
    settings = get_settings()
    return bool(settings.supabase_url and settings.supabase_service_role_key)


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    with _client_lock:
        _service_client = None
