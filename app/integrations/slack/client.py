from typing import Optional

from slack_sdk import WebClient

from infrastructure.configuration import SlackSettings
from infrastructure.services.providers import get_settings


def create_web_client(slack: SlackSettings) -> Optional[WebClient]:
    """Build a WebClient from Slack settings, or None without a bot token."""
    if not slack.SLACK_BOT_TOKEN:
        return None
    return WebClient(
        token=slack.SLACK_BOT_TOKEN,
        timeout=slack.SLACK_HTTP_TIMEOUT_SECONDS,
    )


class SlackClientManager:
    """Manages the Slack API client. Ensures a single instance is used throughout the application."""

    _client: Optional[WebClient] = None

    @classmethod
    def get_client(cls) -> Optional[WebClient]:
        """Returns a singleton instance of the Slack WebClient.

        Returns None when no bot token is configured.
        """
        if cls._client is None:
            cls._client = create_web_client(get_settings().slack)
        return cls._client

    @classmethod
    def reset(cls) -> None:
        """Drop the cached client, e.g. after the token changed."""
        cls._client = None
