from unittest.mock import patch

from infrastructure.configuration import SlackSettings
from integrations.slack.client import SlackClientManager, create_web_client


def test_create_web_client_without_token():
    assert create_web_client(SlackSettings(SLACK_BOT_TOKEN=None)) is None


@patch("integrations.slack.client.WebClient")
def test_create_web_client_with_token(mock_web_client):
    slack = SlackSettings(SLACK_BOT_TOKEN="xoxb-test", SLACK_HTTP_TIMEOUT_SECONDS=9)

    client = create_web_client(slack)

    assert client is mock_web_client.return_value
    mock_web_client.assert_called_once_with(token="xoxb-test", timeout=9)


def test_get_client_without_token():
    assert SlackClientManager.get_client() is None


@patch("integrations.slack.client.WebClient")
def test_get_client_is_singleton(mock_web_client, monkeypatch):
    monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-test")

    first = SlackClientManager.get_client()
    second = SlackClientManager.get_client()

    assert first is second
    mock_web_client.assert_called_once()


@patch("integrations.slack.client.WebClient")
def test_reset_drops_cached_client(mock_web_client, monkeypatch):
    monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-test")
    SlackClientManager.get_client()

    SlackClientManager.reset()
    SlackClientManager.get_client()

    assert mock_web_client.call_count == 2
