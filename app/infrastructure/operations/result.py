"""Result of a single call to an external integration."""

from dataclasses import dataclass
from typing import Any, Optional

from infrastructure.operations.status import OperationStatus


@dataclass(frozen=True)
class OperationResult:
    """Outcome of one Slack or webhook call, returned instead of raising.

    ``data`` holds the payload on success (members list, message ``ts``) and
    the raw platform response on failure. ``retry_after`` is only set for
    rate-limited calls; nothing in this package retries on its own.
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    retry_after: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(cls, data: Optional[Any] = None, message: str = "ok") -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def failure(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        if status == OperationStatus.SUCCESS:
            raise ValueError("failure() needs a non-success status")
        return cls(
            status=status,
            message=message,
            data=data,
            error_code=error_code,
            retry_after=retry_after,
        )

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Rejected request or malformed payload; repeating the call won't help."""
        return cls.failure(OperationStatus.PERMANENT_ERROR, message, error_code)
