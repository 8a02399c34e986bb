"""Visitor arrival alerts.

Formats the alert and hands it to the notification dispatcher, which picks
the Slack bot token, the incoming webhook, or the demo channel in that order.

Usage:
    from modules.visitors.notifications import VisitorNotifier

    notifier = VisitorNotifier()
    sent = notifier.notify("U123456", "Ada Lovelace", "Interview")
"""

from datetime import datetime
from typing import Optional

from infrastructure.configuration import Settings
from infrastructure.logging import get_module_logger
from infrastructure.notifications import (
    DemoChannel,
    DirectMessageChannel,
    NotificationDispatcher,
    WebhookChannel,
)
from infrastructure.services.providers import get_settings
from integrations.slack.client import SlackClientManager, create_web_client
from modules.visitors.models import VisitorAlert

logger = get_module_logger()

VISITOR_ALERT_TEMPLATE = (
    "👋 *Visitor Alert*\n\n"
    "*{visitor_name}* is here to see you!\n\n"
    "📋 *Purpose:* {purpose}\n"
    "🏢 *Location:* {location}\n"
    "⏰ *Time:* {time}\n\n"
    "Please come to reception when convenient."
)


def format_alert_time(timestamp: datetime) -> str:
    # 12-hour clock without a leading zero, e.g. "3:04:05 PM"
    return timestamp.strftime("%I:%M:%S %p").lstrip("0")


def format_visitor_alert(alert: VisitorAlert, location: str = "Reception") -> str:
    return VISITOR_ALERT_TEMPLATE.format(
        visitor_name=alert.visitor_name,
        purpose=alert.purpose,
        location=location,
        time=format_alert_time(alert.timestamp),
    )


def is_slack_configured(settings: Optional[Settings] = None) -> bool:
    """True when a bot token or a webhook URL is configured. No I/O."""
    slack = (settings or get_settings()).slack
    return slack.has_bot_token or slack.has_webhook


def build_notification_dispatcher(
    settings: Optional[Settings] = None,
) -> NotificationDispatcher:
    """Build the direct message → webhook → demo dispatcher from settings.

    Without explicit settings the application-scoped Slack client is reused.
    """
    if settings is None:
        settings = get_settings()
        client = SlackClientManager.get_client()
    else:
        client = create_web_client(settings.slack)

    return NotificationDispatcher(
        channels=[
            DirectMessageChannel(client),
            WebhookChannel(
                settings.slack.SLACK_WEBHOOK_URL,
                username=settings.visitors.sender_name,
                icon_emoji=settings.visitors.icon_emoji,
                timeout=settings.slack.SLACK_HTTP_TIMEOUT_SECONDS,
            ),
            DemoChannel(delay_seconds=settings.visitors.demo_delivery_delay_seconds),
        ]
    )


class VisitorNotifier:
    """Sends visitor arrival alerts to the host.

    Args:
        dispatcher: Dispatcher to use. Built from settings when omitted.
        settings: Settings used for the dispatcher and the alert location.
    """

    def __init__(
        self,
        dispatcher: Optional[NotificationDispatcher] = None,
        settings: Optional[Settings] = None,
    ):
        if dispatcher is None:
            dispatcher = build_notification_dispatcher(settings)
        self.dispatcher = dispatcher
        self.location = (settings or get_settings()).visitors.location

    def notify(self, recipient_id: str, visitor_name: str, purpose: str) -> bool:
        """Alert ``recipient_id`` that ``visitor_name`` has arrived.

        Never raises. Returns True when the alert was delivered or accepted
        by the demo channel, False when the platform declined it or the
        attempt failed with an error.
        """
        try:
            alert = VisitorAlert(
                recipient_id=recipient_id,
                visitor_name=visitor_name,
                purpose=purpose,
            )
            message = format_visitor_alert(alert, location=self.location)
            result = self.dispatcher.send(alert.recipient_id, message)
        except Exception as e:
            logger.error(
                "visitor_notification_error",
                recipient_id=recipient_id,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return False

        logger.info(
            "visitor_notification_result",
            recipient_id=recipient_id,
            channel=result.channel,
            status=result.status.value,
        )
        return result.is_delivered

    def is_configured(self) -> bool:
        """True when a bot token or a webhook URL is configured."""
        return self.dispatcher.is_configured()
