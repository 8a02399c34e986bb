"""Operation status enumeration.

Classifies the outcome of calls made to external integrations (Slack Web
API, incoming webhooks, Supabase) so callers can decide on a fallback.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Call completed and the platform reported success
        TRANSIENT_ERROR: Rate limited, timed out or server-side failure
        PERMANENT_ERROR: Rejected request or malformed response
        UNAUTHORIZED: Missing, revoked or under-scoped credentials
        NOT_FOUND: Unknown user, channel or webhook
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
