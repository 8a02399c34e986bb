"""Error classifiers for integration failures.

Converts Slack SDK exceptions and raw webhook HTTP responses into
standardized OperationResult objects.

Key Functions:
- classify_slack_error(): slack_sdk SlackApiError → OperationResult
- classify_http_response(): requests.Response → OperationResult

Usage:
    from infrastructure.operations.classifiers import classify_slack_error

    try:
        response = client.users_list()
    except SlackApiError as exc:
        return classify_slack_error(exc)
"""

from typing import Optional

import requests
from slack_sdk.errors import SlackApiError

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

SLACK_AUTH_ERRORS = frozenset(
    {
        "not_authed",
        "invalid_auth",
        "account_inactive",
        "token_revoked",
        "token_expired",
        "missing_scope",
        "no_permission",
    }
)
SLACK_NOT_FOUND_ERRORS = frozenset(
    {"channel_not_found", "user_not_found", "users_not_found"}
)
SLACK_TRANSIENT_ERRORS = frozenset(
    {"ratelimited", "service_unavailable", "internal_error", "fatal_error", "request_timeout"}
)

DEFAULT_RETRY_AFTER = 30


def _retry_after(headers) -> int:
    value = None
    if headers is not None and hasattr(headers, "get"):
        value = headers.get("Retry-After") or headers.get("retry-after")
    try:
        return int(value) if value is not None else DEFAULT_RETRY_AFTER
    except (TypeError, ValueError):
        return DEFAULT_RETRY_AFTER


def classify_slack_error(exc: SlackApiError) -> OperationResult:
    """Classify a Slack Web API error into an OperationResult.

    The SDK raises SlackApiError both for non-200 HTTP responses and for
    200 responses carrying ``"ok": false``. The Slack error string is kept
    as the error_code.

    Mapping:
    - HTTP 429 / ratelimited: TRANSIENT_ERROR with retry_after
    - invalid_auth, not_authed, missing_scope, ...: UNAUTHORIZED
    - channel_not_found, user_not_found: NOT_FOUND
    - HTTP 5xx, internal_error, ...: TRANSIENT_ERROR
    - anything else: PERMANENT_ERROR

    Args:
        exc: Exception raised by slack_sdk.WebClient

    Returns:
        OperationResult carrying the Slack error code and raw response data
    """
    response = getattr(exc, "response", None)
    status_code: Optional[int] = getattr(response, "status_code", None)
    data = getattr(response, "data", None)
    error_code = "unknown_error"
    if isinstance(data, dict) and data.get("error"):
        error_code = data["error"]

    if status_code == 429 or error_code == "ratelimited":
        return OperationResult.failure(
            OperationStatus.TRANSIENT_ERROR,
            "Slack API rate limited",
            error_code="ratelimited",
            retry_after=_retry_after(getattr(response, "headers", None)),
            data=data,
        )

    if error_code in SLACK_AUTH_ERRORS or status_code in (401, 403):
        return OperationResult.failure(
            OperationStatus.UNAUTHORIZED,
            f"Slack API authentication failed: {error_code}",
            error_code=error_code,
            data=data,
        )

    if error_code in SLACK_NOT_FOUND_ERRORS or status_code == 404:
        return OperationResult.failure(
            OperationStatus.NOT_FOUND,
            f"Slack resource not found: {error_code}",
            error_code=error_code,
            data=data,
        )

    if error_code in SLACK_TRANSIENT_ERRORS or (
        status_code is not None and 500 <= status_code < 600
    ):
        return OperationResult.failure(
            OperationStatus.TRANSIENT_ERROR,
            f"Slack API server error ({status_code}): {error_code}",
            error_code=error_code,
            data=data,
        )

    return OperationResult.failure(
        OperationStatus.PERMANENT_ERROR,
        f"Slack API error: {error_code}",
        error_code=error_code,
        data=data,
    )


def classify_http_response(response: requests.Response) -> OperationResult:
    """Classify a plain HTTP response (incoming webhooks) into an OperationResult.

    Any 2xx status is a success. Slack webhooks answer errors with a short
    plain-text body (``invalid_payload``, ``no_service``, ...), which is kept
    in the message.

    Args:
        response: Response returned by requests

    Returns:
        OperationResult with an ``HTTP_<status>`` error code on failure
    """
    status_code = response.status_code
    if 200 <= status_code < 300:
        return OperationResult.success(
            data={"status_code": status_code}, message="Webhook accepted"
        )

    body = (response.text or "").strip()
    error_code = f"HTTP_{status_code}"
    message = f"Webhook rejected ({status_code}): {body or response.reason}"

    if status_code == 429:
        return OperationResult.failure(
            OperationStatus.TRANSIENT_ERROR,
            message,
            error_code=error_code,
            retry_after=_retry_after(response.headers),
        )
    if status_code in (401, 403):
        return OperationResult.failure(
            OperationStatus.UNAUTHORIZED, message, error_code=error_code
        )
    if status_code in (404, 410):
        return OperationResult.failure(
            OperationStatus.NOT_FOUND, message, error_code=error_code
        )
    if 500 <= status_code < 600:
        return OperationResult.failure(
            OperationStatus.TRANSIENT_ERROR, message, error_code=error_code
        )
    return OperationResult.permanent_error(message, error_code=error_code)
