"""Incoming webhook channel."""

from typing import Optional

from infrastructure.logging import get_module_logger
from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.models import DeliveryResult
from integrations.slack.messages import post_webhook

logger = get_module_logger()


class WebhookChannel(NotificationChannel):
    """Posts the message to a Slack incoming webhook (general channel).

    The webhook posts to the channel it was created for, so the recipient ID
    is only recorded in the result. Any 2xx response is a delivery.
    """

    def __init__(
        self,
        webhook_url: Optional[str],
        username: str = "OttoHello Visitor System",
        icon_emoji: str = ":wave:",
        timeout: int = 30,
    ):
        self._webhook_url = webhook_url
        self.username = username
        self.icon_emoji = icon_emoji
        self.timeout = timeout

    @property
    def channel_name(self) -> str:
        return "webhook"

    @property
    def is_available(self) -> bool:
        return self._webhook_url is not None

    def build_payload(self, message: str) -> dict:
        return {
            "text": message,
            "username": self.username,
            "icon_emoji": self.icon_emoji,
        }

    def deliver(self, recipient_id: str, message: str) -> DeliveryResult:
        if self._webhook_url is None:
            return DeliveryResult.unavailable(self.channel_name, recipient_id)

        result = post_webhook(
            self._webhook_url, self.build_payload(message), timeout=self.timeout
        )
        delivery = DeliveryResult.from_operation(self.channel_name, recipient_id, result)

        if delivery.is_delivered:
            logger.info("slack_webhook_sent", recipient_id=recipient_id)
        else:
            logger.warning(
                "slack_webhook_failed",
                recipient_id=recipient_id,
                error_code=delivery.error_code,
                error=delivery.message,
            )
        return delivery
