"""Demo channel: logs the message instead of sending it."""

import time

from infrastructure.logging import get_module_logger
from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.models import DeliveryResult, DeliveryStatus

logger = get_module_logger()


class DemoChannel(NotificationChannel):
    """Always available; reports a simulated delivery after a short delay.

    A DELIVERED result from this channel means "accepted for simulated
    delivery", nothing reached Slack.
    """

    simulated = True

    def __init__(self, delay_seconds: float = 0.5):
        self.delay_seconds = delay_seconds

    @property
    def channel_name(self) -> str:
        return "demo"

    @property
    def is_available(self) -> bool:
        return True

    def deliver(self, recipient_id: str, message: str) -> DeliveryResult:
        logger.info(
            "slack_demo_delivery",
            recipient_id=recipient_id,
            text=message,
        )
        if self.delay_seconds > 0:
            time.sleep(self.delay_seconds)
        return DeliveryResult(
            channel=self.channel_name,
            status=DeliveryStatus.DELIVERED,
            recipient_id=recipient_id,
            message=f"Simulated delivery to {recipient_id}",
        )
