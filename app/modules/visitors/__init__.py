"""Visitor reception module.

Slack-backed helpers used by the reception front desk:

- directory: roster of Slack users to pick the host from
- notifications: visitor arrival alerts sent to the host
"""

from modules.visitors.models import DirectoryProfile, DirectoryUser, VisitorAlert
from modules.visitors.fallback import FALLBACK_USERS
from modules.visitors.directory import (
    UserDirectoryProvider,
    build_user_directory,
    find_user_by_name,
)
from modules.visitors.notifications import (
    VisitorNotifier,
    build_notification_dispatcher,
    format_visitor_alert,
    is_slack_configured,
)

__all__ = [
    "DirectoryProfile",
    "DirectoryUser",
    "VisitorAlert",
    "FALLBACK_USERS",
    "UserDirectoryProvider",
    "build_user_directory",
    "find_user_by_name",
    "VisitorNotifier",
    "build_notification_dispatcher",
    "format_visitor_alert",
    "is_slack_configured",
]
