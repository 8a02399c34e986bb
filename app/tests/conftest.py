"""Shared fixtures for the test suite."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from slack_sdk.errors import SlackApiError

from infrastructure.configuration import (
    BackendSettings,
    Settings,
    SlackSettings,
    VisitorAlertSettings,
)
from infrastructure.services.providers import get_settings
from integrations.backend.client import get_backend_client
from integrations.slack.client import SlackClientManager

ENV_VARS = (
    "SLACK_BOT_TOKEN",
    "SLACK_WEBHOOK_URL",
    "SLACK_HTTP_TIMEOUT_SECONDS",
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "VISITOR_ALERT_LOCATION",
    "VISITOR_ALERT_SENDER_NAME",
    "VISITOR_ALERT_ICON_EMOJI",
    "DIRECTORY_FALLBACK_DELAY_SECONDS",
    "DEMO_DELIVERY_DELAY_SECONDS",
    "PREFIX",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run every test without ambient configuration or cached singletons."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the settings
    monkeypatch.chdir(tmp_path)

    get_settings.cache_clear()
    get_backend_client.cache_clear()
    SlackClientManager.reset()
    yield
    get_settings.cache_clear()
    get_backend_client.cache_clear()
    SlackClientManager.reset()


@pytest.fixture
def settings_factory():
    """Build Settings from explicit values, with simulated delays disabled."""

    def _factory(
        token=None,
        webhook_url=None,
        supabase_url=None,
        supabase_key=None,
        location="Reception",
    ):
        return Settings(
            slack=SlackSettings(SLACK_BOT_TOKEN=token, SLACK_WEBHOOK_URL=webhook_url),
            backend=BackendSettings(
                SUPABASE_URL=supabase_url, SUPABASE_ANON_KEY=supabase_key
            ),
            visitors=VisitorAlertSettings(
                VISITOR_ALERT_LOCATION=location,
                DIRECTORY_FALLBACK_DELAY_SECONDS=0,
                DEMO_DELIVERY_DELAY_SECONDS=0,
            ),
        )

    return _factory


@pytest.fixture
def slack_api_error():
    """Build a SlackApiError the way the SDK raises it."""

    def _factory(error="invalid_auth", status_code=200, headers=None):
        response = SimpleNamespace(
            status_code=status_code,
            data={"ok": False, "error": error},
            headers=headers or {},
        )
        return SlackApiError(f"The request to the Slack API failed: {error}", response)

    return _factory


@pytest.fixture
def mock_slack_client():
    """Mock Slack WebClient with successful users.list and chat.postMessage."""
    client = MagicMock()
    client.users_list.return_value = {
        "ok": True,
        "members": [
            {
                "id": "U00AAAAAAA0",
                "name": "ada.lovelace",
                "real_name": "Ada Lovelace",
                "deleted": False,
                "is_bot": False,
                "profile": {
                    "email": "ada@example.com",
                    "display_name": "ada",
                    "image_72": "https://example.com/ada.png",
                },
            },
            {
                "id": "U00AAAAAAA1",
                "name": "grace.hopper",
                "real_name": "Grace Hopper",
                "deleted": False,
                "is_bot": False,
                "profile": {"email": "grace@example.com"},
            },
        ],
    }
    client.chat_postMessage.return_value = {
        "ok": True,
        "channel": "D00AAAAAAA0",
        "ts": "1712345678.000100",
    }
    return client


@pytest.fixture
def webhook_response():
    """Build a minimal requests.Response stand-in."""

    def _factory(status_code=200, text="ok", headers=None):
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        response.reason = "OK" if status_code < 400 else "Error"
        response.headers = headers or {}
        return response

    return _factory
