"""Shared base classes and utilities for settings modules."""

from typing import Any, Iterable, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def normalize_optional(value: Any, placeholders: Iterable[str] = ()) -> Optional[str]:
    """Coerce blank or template placeholder values to None.

    Example `.env` templates ship values such as ``your_slack_bot_token``.
    Those are treated exactly like a missing variable so the rest of the
    application only ever deals with ``Optional`` values.

    Args:
        value: Raw value read from the environment.
        placeholders: Template values meaning "not yet set".

    Returns:
        The stripped value, or None when blank or a placeholder.
    """
    if value is None:
        return None
    value = str(value).strip()
    if not value or value in placeholders:
        return None
    return value


class IntegrationSettings(BaseSettings):
    """Base class for external integration settings.

    All integration settings should inherit from this class to ensure
    consistent configuration behavior (env file loading, case sensitivity).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class FeatureSettings(BaseSettings):
    """Base class for feature module settings.

    All feature settings should inherit from this class to ensure
    consistent configuration behavior.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
