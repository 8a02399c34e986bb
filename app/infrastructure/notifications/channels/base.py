"""Notification channel abstract base class.

All delivery strategies (direct message, webhook, demo) implement this interface.
"""

from abc import ABC, abstractmethod

from infrastructure.notifications.models import DeliveryResult


class NotificationChannel(ABC):
    """Abstract base class for notification channels.

    Each channel handles delivery through a specific mechanism:
    - DirectMessageChannel: Slack chat.postMessage with the bot token
    - WebhookChannel: Slack incoming webhook
    - DemoChannel: logs the message and simulates a delivery

    Class attributes:
        decline_is_final: When True, a DECLINED result from this channel
            ends dispatch instead of moving on to the next channel.
        simulated: When True, the channel does not reach any platform and
            does not count towards ``NotificationDispatcher.is_configured()``.
    """

    decline_is_final: bool = False
    simulated: bool = False

    @property
    @abstractmethod
    def channel_name(self) -> str:
        """Channel identifier used in results and logs."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """True when the channel has the configuration it needs.

        Must not perform I/O.
        """

    @abstractmethod
    def deliver(self, recipient_id: str, message: str) -> DeliveryResult:
        """Deliver a message to a recipient.

        Platform rejections are returned as DECLINED results. Transport
        errors (connection failures, timeouts) propagate to the caller.

        Args:
            recipient_id: Slack user or channel ID
            message: Message text (mrkdwn)

        Returns:
            DeliveryResult with DELIVERED or DECLINED status
        """
