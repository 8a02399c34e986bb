"""Application-scoped providers."""

from functools import lru_cache

from infrastructure.configuration import Settings


@lru_cache
def get_settings() -> Settings:
    """Settings loaded once per process from the environment and `.env`.

    Tests that change environment variables call ``get_settings.cache_clear()``.
    """
    return Settings()
