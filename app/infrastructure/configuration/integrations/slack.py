"""Slack integration settings."""

from typing import Optional

from pydantic import field_validator

from infrastructure.configuration.base import IntegrationSettings, normalize_optional

SLACK_TOKEN_PLACEHOLDER = "your_slack_bot_token"
SLACK_WEBHOOK_PLACEHOLDER = "your_slack_webhook_url"


class SlackSettings(IntegrationSettings):
    """Slack Web API and incoming webhook configuration.

    Environment Variables:
        SLACK_BOT_TOKEN: Slack bot token (xoxb-*) used for users.list and
            chat.postMessage
        SLACK_WEBHOOK_URL: Incoming webhook URL for general channel alerts
        SLACK_HTTP_TIMEOUT_SECONDS: Timeout applied to every Slack request

    Blank values and the ``your_slack_*`` template placeholders are loaded
    as None.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.slack.SLACK_BOT_TOKEN:
            # Live Slack calls are possible
        ```
    """

    SLACK_BOT_TOKEN: Optional[str] = None
    SLACK_WEBHOOK_URL: Optional[str] = None
    SLACK_HTTP_TIMEOUT_SECONDS: int = 30

    @field_validator("SLACK_BOT_TOKEN", mode="before")
    @classmethod
    def normalize_token(cls, v):
        return normalize_optional(v, {SLACK_TOKEN_PLACEHOLDER})

    @field_validator("SLACK_WEBHOOK_URL", mode="before")
    @classmethod
    def normalize_webhook_url(cls, v):
        return normalize_optional(v, {SLACK_WEBHOOK_PLACEHOLDER})

    @property
    def has_bot_token(self) -> bool:
        return self.SLACK_BOT_TOKEN is not None

    @property
    def has_webhook(self) -> bool:
        return self.SLACK_WEBHOOK_URL is not None
