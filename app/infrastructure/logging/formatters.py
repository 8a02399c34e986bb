"""Structlog processors that keep credentials and oversized payloads out of logs.

Usage:
    from infrastructure.logging.formatters import mask_sensitive_data
"""

import re
from typing import Any, Iterable, Optional

# Key fragments whose values are always masked (case-insensitive)
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "api_key",
        "authorization",
        "credential",
        "bearer",
    }
)

# Slack tokens and incoming webhook URLs that end up inside free-text values
SLACK_SECRET_REGEX = re.compile(
    r"xox[abposr]-[A-Za-z0-9-]+|https://hooks\.slack\.com/[^\s\"']+"
)


def _redact(value: Any, patterns: frozenset, mask_value: str) -> Any:
    if isinstance(value, str):
        return SLACK_SECRET_REGEX.sub(mask_value, value)
    if isinstance(value, dict):
        return {
            key: _redact_item(key, item, patterns, mask_value)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return type(value)(_redact(item, patterns, mask_value) for item in value)
    return value


def _redact_item(key: Any, value: Any, patterns: frozenset, mask_value: str) -> Any:
    key_lower = str(key).lower()
    if value is not None and any(p in key_lower for p in patterns):
        return mask_value
    return _redact(value, patterns, mask_value)


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: Optional[Iterable[str]] = None,
):
    """Create a processor that masks credentials in log entries.

    Values of keys containing a sensitive pattern are replaced entirely;
    Slack tokens and webhook URLs inside other strings are replaced in place.
    Nested dicts and lists (e.g. raw platform responses) are walked too.
    """
    patterns = SENSITIVE_PATTERNS | frozenset(additional_patterns or ())

    def processor(logger: Any, method_name: str, event_dict: dict) -> dict:
        return _redact(event_dict, patterns, mask_value)

    return processor


def truncate_large_values(max_length: int = 500):
    """Create a processor that truncates top-level strings longer than max_length."""

    def processor(logger: Any, method_name: str, event_dict: dict) -> dict:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
