"""Supabase client factory."""

from functools import lru_cache
from typing import Optional

from supabase import Client, create_client

from infrastructure.configuration import Settings
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import get_settings

logger = get_module_logger()


def is_backend_configured(settings: Optional[Settings] = None) -> bool:
    """True when both SUPABASE_URL and SUPABASE_ANON_KEY are set."""
    settings = settings or get_settings()
    return settings.backend.is_configured


def build_backend_client(settings: Optional[Settings] = None) -> Optional[Client]:
    """Build a Supabase client from the configured URL/key pair.

    Returns None (demo mode) when either value is missing.
    """
    settings = settings or get_settings()
    backend = settings.backend
    if not backend.is_configured:
        logger.warning(
            "backend_not_configured",
            has_url=backend.SUPABASE_URL is not None,
            has_key=backend.SUPABASE_ANON_KEY is not None,
            mode="demo",
        )
        return None

    client = create_client(backend.SUPABASE_URL, backend.SUPABASE_ANON_KEY)
    logger.info("backend_client_created", url=backend.SUPABASE_URL)
    return client


@lru_cache
def get_backend_client() -> Optional[Client]:
    """Application-scoped Supabase client built from get_settings()."""
    return build_backend_client()
