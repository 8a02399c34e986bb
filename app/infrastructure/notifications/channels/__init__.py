"""Notification channel implementations."""

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.channels.direct_message import DirectMessageChannel
from infrastructure.notifications.channels.webhook import WebhookChannel
from infrastructure.notifications.channels.demo import DemoChannel

__all__ = [
    "NotificationChannel",
    "DirectMessageChannel",
    "WebhookChannel",
    "DemoChannel",
]
