"""Direct message channel using the Slack Web API."""

from typing import Optional

from slack_sdk import WebClient

from infrastructure.logging import get_module_logger
from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.models import DeliveryResult
from integrations.slack.messages import post_message

logger = get_module_logger()


class DirectMessageChannel(NotificationChannel):
    """Sends the message with chat.postMessage, targeting the recipient ID.

    Available only when a bot-token WebClient is supplied. A declined direct
    message is final: the webhook is an alternative to the bot token, not a
    retry path.
    """

    decline_is_final = True

    def __init__(self, client: Optional[WebClient]):
        self._client = client

    @property
    def channel_name(self) -> str:
        return "direct_message"

    @property
    def is_available(self) -> bool:
        return self._client is not None

    def deliver(self, recipient_id: str, message: str) -> DeliveryResult:
        if self._client is None:
            return DeliveryResult.unavailable(self.channel_name, recipient_id)

        result = post_message(self._client, channel=recipient_id, text=message)
        delivery = DeliveryResult.from_operation(self.channel_name, recipient_id, result)

        if delivery.is_delivered:
            logger.info(
                "slack_dm_sent",
                recipient_id=recipient_id,
                ts=delivery.external_id,
            )
        else:
            logger.error(
                "slack_dm_failed",
                recipient_id=recipient_id,
                error_code=delivery.error_code,
                error=delivery.message,
            )
        return delivery
