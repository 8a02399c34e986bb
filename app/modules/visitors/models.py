from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class DirectoryProfile(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    email: Optional[str] = None
    display_name: Optional[str] = None


class DirectoryUser(BaseModel):
    """A Slack account as shown in the host picker.

    Attributes:
        id: Slack user ID
        name: Slack handle (e.g. "john.doe")
        real_name: Full name shown to the visitor
        profile: Optional email and profile display name
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str
    real_name: str
    profile: Optional[DirectoryProfile] = None

    @classmethod
    def from_slack_member(cls, member: Dict[str, Any]) -> "DirectoryUser":
        """Build from a users.list member.

        real_name falls back to the profile display name, then the handle.
        """
        profile = member.get("profile") or None
        display_name = profile.get("display_name") if profile else None
        return cls(
            id=member["id"],
            name=member["name"],
            real_name=member.get("real_name") or display_name or member["name"],
            profile=profile,
        )


class VisitorAlert(BaseModel):
    """One outbound visitor arrival alert. Discarded after the send attempt."""

    model_config = ConfigDict(frozen=True)

    recipient_id: str
    visitor_name: str
    purpose: str
    timestamp: datetime = Field(default_factory=datetime.now)
