"""
Supabase client configuration for the hosted authentication service.
Handles Supabase initialization with proper error handling and connection management.

The shared client holds no per-user state: PKCE verifiers travel with each sign-in
flow and session-bound calls get a client of their own from ``create_auth_client``.
"""

import logging
from functools import lru_cache
from typing import Optional

from supabase import Client, ClientOptions, create_client

from .settings import Settings, get_settings


logger = logging.getLogger(__name__)


def _build_client(settings: Settings) -> Client:
    """Create a Supabase client with server-side options."""
    try:
        client_options = ClientOptions(
            schema="public",
            headers={
                "User-Agent": f"CareCircleAPI/{settings.APP_VERSION}",
            },
            auto_refresh_token=False,
            persist_session=False,
            # The code challenge is added per flow by the auth adapter
            flow_type="implicit",
        )

        return create_client(
            supabase_url=settings.SUPABASE_URL,
            supabase_key=settings.SUPABASE_ANON_KEY,
            options=client_options
        )

    except Exception as e:
        logger.error(f"Failed to initialize Supabase client: {e}")
        raise ConnectionError(f"Supabase initialization failed: {e}")


class SupabaseManager:
    """
    Supabase client manager with lazy connection handling.
    Provides the auth client used by the identity module.
    """

    def __init__(self):
        self._client: Optional[Client] = None
        self.settings = get_settings()

    @property
    def client(self) -> Client:
        """Get or create Supabase client with lazy initialization."""
        if self._client is None:
            self._client = _build_client(self.settings)
            logger.info("Supabase client initialized successfully")
        return self._client

    def get_auth_client(self):
        """Get Supabase auth client for authentication operations."""
        return self.client.auth

    def close(self):
        """Drop the cached client."""
        if self._client:
            self._client = None
            logger.info("Supabase client connections closed")


@lru_cache()
def get_supabase_manager() -> SupabaseManager:
    """
    Get cached Supabase manager instance.

    Returns:
        SupabaseManager: Singleton Supabase manager
    """
    return SupabaseManager()


def get_supabase_auth():
    """Get the shared Supabase auth client."""
    return get_supabase_manager().get_auth_client()


def create_auth_client():
    """
    Build an auth client owned by a single request.

    Used for calls that act as the signed-in user (``set_session`` then ``update_user``)
    so one caller's session is never visible to another.
    """
    return _build_client(get_settings()).auth


async def cleanup_supabase():
    """Cleanup Supabase connections on application shutdown."""
    get_supabase_manager().close()
    logger.info("Supabase cleanup completed")
