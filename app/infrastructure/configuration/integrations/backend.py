"""Backend (Supabase) integration settings."""

from typing import Optional

from pydantic import field_validator

from infrastructure.configuration.base import IntegrationSettings, normalize_optional

BACKEND_PLACEHOLDERS = frozenset({"your_supabase_url", "your_supabase_anon_key"})


class BackendSettings(IntegrationSettings):
    """Supabase project configuration.

    Environment Variables:
        SUPABASE_URL: Project URL (https://<project>.supabase.co)
        SUPABASE_ANON_KEY: Public anon key for the project
    """

    SUPABASE_URL: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None

    @field_validator("SUPABASE_URL", "SUPABASE_ANON_KEY", mode="before")
    @classmethod
    def normalize_credentials(cls, v):
        return normalize_optional(v, BACKEND_PLACEHOLDERS)

    @property
    def is_configured(self) -> bool:
        """True when both the URL and the anon key are present."""
        return bool(self.SUPABASE_URL and self.SUPABASE_ANON_KEY)
