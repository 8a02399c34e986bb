"""Unit tests for infrastructure.logging.formatters."""

import pytest

from infrastructure.logging.formatters import mask_sensitive_data, truncate_large_values


@pytest.mark.unit
class TestMaskSensitiveData:
    def test_masks_sensitive_keys(self):
        processor = mask_sensitive_data()

        result = processor(None, "info", {"event": "x", "bot_token": "xoxb-1", "user": "U1"})

        assert result["bot_token"] == "***REDACTED***"
        assert result["user"] == "U1"

    def test_keeps_none_values(self):
        processor = mask_sensitive_data()

        result = processor(None, "info", {"token": None})

        assert result["token"] is None

    def test_additional_patterns(self):
        processor = mask_sensitive_data(additional_patterns=frozenset({"webhook_url"}))

        result = processor(None, "info", {"webhook_url": "https://example.com/hook"})

        assert result["webhook_url"] == "***REDACTED***"

    def test_masks_slack_secrets_inside_strings(self):
        processor = mask_sensitive_data(mask_value="[masked]")

        result = processor(
            None,
            "error",
            {
                "error": "POST https://hooks.slack.com/services/T0/B0/abc failed",
                "detail": "token xoxb-1234-abcd rejected",
            },
        )

        assert result["error"] == "POST [masked] failed"
        assert result["detail"] == "token [masked] rejected"


@pytest.mark.unit
class TestTruncateLargeValues:
    def test_truncates_long_strings(self):
        processor = truncate_large_values(max_length=5)

        result = processor(None, "info", {"text": "abcdefgh"})

        assert result["text"] == "abcde...[truncated, 8 chars total]"

    def test_short_strings_untouched(self):
        processor = truncate_large_values(max_length=5)

        assert processor(None, "info", {"text": "abc"})["text"] == "abc"


@pytest.mark.unit
class TestMaskNestedValues:
    def test_masks_inside_platform_responses(self):
        processor = mask_sensitive_data()

        result = processor(
            None,
            "error",
            {
                "platform_response": {
                    "ok": False,
                    "error": "invalid_auth",
                    "headers": {"Authorization": "Bearer xoxb-9"},
                    "warnings": ["seen xoxp-42 in request"],
                }
            },
        )

        response = result["platform_response"]
        assert response["error"] == "invalid_auth"
        assert response["headers"]["Authorization"] == "***REDACTED***"
        assert response["warnings"] == ["seen ***REDACTED*** in request"]
