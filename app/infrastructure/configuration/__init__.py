"""Infrastructure configuration module - public API.

This module provides centralized configuration management using Pydantic
BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    SlackSettings: Slack integration settings
    BackendSettings: Supabase integration settings
    VisitorAlertSettings: Visitor alert feature settings

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    bot_token = settings.slack.SLACK_BOT_TOKEN
    supabase_url = settings.backend.SUPABASE_URL
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import SlackSettings, BackendSettings
from infrastructure.configuration.features import VisitorAlertSettings

__all__ = ["Settings", "SlackSettings", "BackendSettings", "VisitorAlertSettings"]
