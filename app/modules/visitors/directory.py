"""Slack user directory with a fixed fallback roster.

Usage:
    from modules.visitors.directory import build_user_directory, find_user_by_name

    directory = build_user_directory()
    users = directory.fetch_users()
    host = find_user_by_name(users, "John Doe")
"""

import time
from typing import List, Optional, Sequence

from slack_sdk import WebClient

from infrastructure.configuration import Settings
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import get_settings
from integrations.slack.client import SlackClientManager, create_web_client
from integrations.slack.users import get_all_users
from modules.visitors.fallback import FALLBACK_USERS
from modules.visitors.models import DirectoryUser

logger = get_module_logger()


class UserDirectoryProvider:
    """Produces the current roster of Slack users.

    ``fetch_users`` never raises and never returns an empty list: without a
    client, or when the live call fails for any reason, the fixed fallback
    roster is returned.

    Args:
        client: Slack WebClient built from the bot token, or None
        fallback_delay_seconds: Simulated latency before returning the
            fallback roster
    """

    def __init__(
        self, client: Optional[WebClient], fallback_delay_seconds: float = 0.3
    ):
        self._client = client
        self.fallback_delay_seconds = fallback_delay_seconds

    @property
    def is_live(self) -> bool:
        return self._client is not None

    def fetch_users(self) -> List[DirectoryUser]:
        if self._client is None:
            logger.info("directory_using_fallback", reason="bot_token_not_configured")
            return self._fallback(delay=True)

        try:
            users = self._fetch_live_users()
        except Exception as e:
            logger.error(
                "directory_fetch_error",
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return self._fallback(delay=False)

        if users is None:
            return self._fallback(delay=True)
        return users

    def _fetch_live_users(self) -> Optional[List[DirectoryUser]]:
        result = get_all_users(self._client)
        if not result.is_success:
            logger.warning(
                "directory_using_fallback",
                reason="users_list_failed",
                error_code=result.error_code,
            )
            return None

        users: List[DirectoryUser] = []
        seen_ids = set()
        seen_handles = set()
        for member in result.data:
            if not member.get("real_name"):
                continue
            user = DirectoryUser.from_slack_member(member)
            # first occurrence wins for both id and handle
            if user.id in seen_ids or user.name in seen_handles:
                continue
            seen_ids.add(user.id)
            seen_handles.add(user.name)
            users.append(user)

        if not users:
            logger.warning("directory_using_fallback", reason="no_eligible_members")
            return None

        logger.info("directory_fetched", user_count=len(users))
        return users

    def _fallback(self, delay: bool) -> List[DirectoryUser]:
        if delay and self.fallback_delay_seconds > 0:
            time.sleep(self.fallback_delay_seconds)
        return list(FALLBACK_USERS)


def find_user_by_name(
    users: Sequence[DirectoryUser], name: str
) -> Optional[DirectoryUser]:
    """Find a user by name, case-insensitively.

    Matches the full name, the handle or the profile display name exactly,
    or any part of the profile email. The first match in ``users`` wins.

    Args:
        users: Users to search, in priority order
        name: Name typed by the visitor

    Returns:
        The matching user, or None.
    """
    search_name = name.lower().strip()
    if not search_name:
        return None

    for user in users:
        profile = user.profile
        if user.real_name.lower() == search_name or user.name.lower() == search_name:
            return user
        if profile is None:
            continue
        if profile.display_name and profile.display_name.lower() == search_name:
            return user
        if profile.email and search_name in profile.email.lower():
            return user
    return None


def build_user_directory(settings: Optional[Settings] = None) -> UserDirectoryProvider:
    """Build a directory provider from application settings.

    Without explicit settings the application-scoped Slack client is reused.
    """
    if settings is None:
        settings = get_settings()
        client = SlackClientManager.get_client()
    else:
        client = create_web_client(settings.slack)
    return UserDirectoryProvider(
        client=client,
        fallback_delay_seconds=settings.visitors.directory_fallback_delay_seconds,
    )
