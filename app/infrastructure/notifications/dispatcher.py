"""Notification dispatcher with ordered channel fallback.

Channels are tried in a fixed order. The first DELIVERED result wins;
UNAVAILABLE channels are skipped; a DECLINED result either ends dispatch
(``decline_is_final``) or moves on to the next channel.

Usage Example:
    from infrastructure.notifications import (
        NotificationDispatcher,
        DirectMessageChannel,
        WebhookChannel,
        DemoChannel,
    )

    dispatcher = NotificationDispatcher(
        channels=[
            DirectMessageChannel(client),
            WebhookChannel(webhook_url),
            DemoChannel(),
        ]
    )

    result = dispatcher.send("U123456", "Your visitor has arrived")
    if result.is_delivered:
        logger.info("notification_delivered", channel=result.channel)
"""

from typing import List, Sequence

import structlog

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.models import DeliveryResult, DeliveryStatus

logger = structlog.get_logger()


def deliver_first(
    channels: Sequence[NotificationChannel], recipient_id: str, message: str
) -> DeliveryResult:
    """Try channels in order and return the deciding result.

    Args:
        channels: Channels in priority order
        recipient_id: Slack user or channel ID
        message: Message text

    Returns:
        The first DELIVERED result, the first final DECLINED result, the last
        DECLINED result when every tried channel declined, or an UNAVAILABLE
        result when no channel could be tried.
    """
    last_declined = None

    for channel in channels:
        if not channel.is_available:
            logger.debug("channel_unavailable", channel_name=channel.channel_name)
            continue

        result = channel.deliver(recipient_id, message)

        if result.status == DeliveryStatus.DELIVERED:
            return result

        if result.status == DeliveryStatus.DECLINED:
            if channel.decline_is_final:
                return result
            last_declined = result
            logger.info(
                "channel_declined_trying_next",
                channel_name=channel.channel_name,
                error_code=result.error_code,
            )

    if last_declined is not None:
        return last_declined
    return DeliveryResult.unavailable("none", recipient_id)


class NotificationDispatcher:
    """Ordered-fallback notification dispatcher.

    Attributes:
        channels: Channels in the order they are tried
    """

    def __init__(self, channels: Sequence[NotificationChannel]):
        self.channels: List[NotificationChannel] = list(channels)

        logger.info(
            "initialized_notification_dispatcher",
            channels=self.get_available_channels(),
        )

    def send(self, recipient_id: str, message: str) -> DeliveryResult:
        """Send a message through the first channel that accepts it.

        Transport exceptions raised by a channel propagate.
        """
        result = deliver_first(self.channels, recipient_id, message)
        logger.info(
            "notification_dispatched",
            recipient_id=recipient_id,
            channel=result.channel,
            status=result.status.value,
            error_code=result.error_code,
        )
        return result

    def is_configured(self) -> bool:
        """True when at least one non-simulated channel is available. No I/O."""
        return any(
            channel.is_available and not channel.simulated for channel in self.channels
        )

    def get_available_channels(self) -> List[str]:
        """Names of the channels that are currently available, in order."""
        return [channel.channel_name for channel in self.channels if channel.is_available]
