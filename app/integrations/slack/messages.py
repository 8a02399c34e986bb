"""Slack Message Module.

Posts messages through the Web API (chat.postMessage) or an incoming webhook.
"""

import json
from typing import Any, Dict

import requests
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from infrastructure.logging import get_module_logger
from infrastructure.operations import (
    OperationResult,
    classify_http_response,
    classify_slack_error,
)

logger = get_module_logger()


def post_message(client: WebClient, channel: str, text: str) -> OperationResult:
    """Post a plain text message to a channel or user ID with previews disabled.

    Args:
        client (WebClient): The Slack client instance.
        channel (str): Channel ID, or user ID for a direct message.
        text (str): Message text (mrkdwn).

    Returns:
        OperationResult: ``{"channel", "ts"}`` in ``data`` on success.

    Transport errors (connection, timeout) are not caught.
    """
    try:
        response = client.chat_postMessage(
            channel=channel,
            text=text,
            unfurl_links=False,
            unfurl_media=False,
        )
    except SlackApiError as e:
        return classify_slack_error(e)

    return OperationResult.success(
        data={"channel": response.get("channel"), "ts": response.get("ts")},
        message=f"Message posted to {channel}",
    )


def post_webhook(url: str, payload: Dict[str, Any], timeout: int = 30) -> OperationResult:
    """Post a JSON payload to a Slack incoming webhook.

    Transport errors (requests.RequestException) are not caught.
    """
    headers = {"Content-Type": "application/json"}
    response = requests.post(
        url, data=json.dumps(payload), headers=headers, timeout=timeout
    )
    return classify_http_response(response)
