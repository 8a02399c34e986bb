"""Operation result types and status enums.

Standardized result types for integration calls, including the status
enum, the result dataclass, and classifiers for Slack and HTTP failures.
"""

from infrastructure.operations.classifiers import (
    classify_http_response,
    classify_slack_error,
)
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_http_response",
    "classify_slack_error",
]
