"""Notification system core models.

Platform-agnostic delivery outcome shared by every notification channel.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel

from infrastructure.operations import OperationResult


class DeliveryStatus(Enum):
    """Outcome of one delivery strategy.

    DELIVERED: the platform accepted the message (or it was simulated)
    DECLINED: the channel was tried and the platform rejected the message
    UNAVAILABLE: the channel is not configured and was not tried
    """

    DELIVERED = "delivered"
    DECLINED = "declined"
    UNAVAILABLE = "unavailable"


class DeliveryResult(BaseModel):
    """Result of a single delivery attempt.

    Attributes:
        channel: Channel name (e.g. "direct_message", "webhook", "demo")
        status: DeliveryStatus
        recipient_id: Slack user or channel ID targeted
        message: Human-readable result message
        error_code: Platform error code for declined deliveries
        external_id: Platform message ID (Slack ts) when known
        platform_response: Raw platform response (debugging)
    """

    channel: str
    status: DeliveryStatus
    recipient_id: str = ""
    message: str = ""
    error_code: Optional[str] = None
    external_id: Optional[str] = None
    platform_response: Optional[Dict[str, Any]] = None

    @property
    def is_delivered(self) -> bool:
        return self.status == DeliveryStatus.DELIVERED

    @classmethod
    def unavailable(cls, channel: str, recipient_id: str = "") -> "DeliveryResult":
        return cls(
            channel=channel,
            status=DeliveryStatus.UNAVAILABLE,
            recipient_id=recipient_id,
            message=f"{channel} channel is not configured",
        )

    @classmethod
    def from_operation(
        cls, channel: str, recipient_id: str, result: OperationResult
    ) -> "DeliveryResult":
        """Map an integration OperationResult to DELIVERED or DECLINED."""
        if result.is_success:
            data = result.data if isinstance(result.data, dict) else {}
            return cls(
                channel=channel,
                status=DeliveryStatus.DELIVERED,
                recipient_id=recipient_id,
                message=result.message,
                external_id=data.get("ts"),
            )
        return cls(
            channel=channel,
            status=DeliveryStatus.DECLINED,
            recipient_id=recipient_id,
            message=result.message,
            error_code=result.error_code,
            platform_response=result.data if isinstance(result.data, dict) else None,
        )
