"""Notification dispatch with ordered channel fallback.

Provides Slack delivery strategies with:
- Direct messages through the Web API (bot token)
- Incoming webhook posts (webhook URL)
- A demo channel that only logs, used when nothing is configured

Usage:
    from infrastructure.notifications import NotificationDispatcher, DemoChannel

    dispatcher = NotificationDispatcher(channels=[DemoChannel(delay_seconds=0)])
    result = dispatcher.send("U123456", "hello")
"""

# Models
from infrastructure.notifications.models import DeliveryResult, DeliveryStatus

# Dispatcher
from infrastructure.notifications.dispatcher import NotificationDispatcher, deliver_first

# Channel interface
from infrastructure.notifications.channels.base import NotificationChannel

# Channel implementations
from infrastructure.notifications.channels.direct_message import DirectMessageChannel
from infrastructure.notifications.channels.webhook import WebhookChannel
from infrastructure.notifications.channels.demo import DemoChannel

__all__ = [
    # Models
    "DeliveryResult",
    "DeliveryStatus",
    # Dispatcher
    "NotificationDispatcher",
    "deliver_first",
    # Channel interface
    "NotificationChannel",
    # Channel implementations
    "DirectMessageChannel",
    "WebhookChannel",
    "DemoChannel",
]
