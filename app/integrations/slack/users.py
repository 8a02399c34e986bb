"""Slack User Modules.

This module contains the user related functionality for the Slack integration.
"""

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, classify_slack_error

USERS_LIST_LIMIT = 1000

logger = get_module_logger()


def get_all_users(
    client: WebClient, deleted=False, is_bot=False, limit=USERS_LIST_LIMIT
) -> OperationResult:
    """Get the users of the Slack workspace with a single users.list call.

    Args:
        client (WebClient): The Slack client instance.
        deleted (bool, optional): Include deleted users. Defaults to False.
        is_bot (bool, optional): Include bot users. Defaults to False.
        limit (int, optional): Page size requested from Slack.

    Returns:
        OperationResult: members list in ``data`` on success.
    """
    try:
        response = client.users_list(limit=limit)
    except SlackApiError as e:
        result = classify_slack_error(e)
        logger.error(
            "get_all_users_failed",
            error_code=result.error_code,
            status=result.status.value,
        )
        return result

    members = response.get("members")
    if not isinstance(members, list):
        logger.error("get_all_users_malformed_response", members_type=type(members).__name__)
        return OperationResult.permanent_error(
            "users.list response has no members list",
            error_code="MALFORMED_RESPONSE",
        )

    # filters
    if not deleted:
        members = [user for user in members if not user.get("deleted")]
    if not is_bot:
        members = [user for user in members if not user.get("is_bot")]

    logger.debug("get_all_users_succeeded", member_count=len(members))
    return OperationResult.success(data=members, message="Fetched Slack users")
