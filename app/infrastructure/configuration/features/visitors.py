"""Visitor alert feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class VisitorAlertSettings(FeatureSettings):
    """Presentation and simulated-latency settings for visitor alerts.

    Environment Variables:
        VISITOR_ALERT_LOCATION: Location shown in the alert (default: Reception)
        VISITOR_ALERT_SENDER_NAME: Sender name used for webhook posts
        VISITOR_ALERT_ICON_EMOJI: Sender icon used for webhook posts
        DIRECTORY_FALLBACK_DELAY_SECONDS: Delay before returning the fallback
            roster (default: 0.3)
        DEMO_DELIVERY_DELAY_SECONDS: Delay of the simulated delivery
            (default: 0.5)

    The delays only emulate network latency in demo mode and can be set to 0.
    """

    location: str = Field(default="Reception", alias="VISITOR_ALERT_LOCATION")
    sender_name: str = Field(
        default="OttoHello Visitor System", alias="VISITOR_ALERT_SENDER_NAME"
    )
    icon_emoji: str = Field(default=":wave:", alias="VISITOR_ALERT_ICON_EMOJI")
    directory_fallback_delay_seconds: float = Field(
        default=0.3, ge=0, alias="DIRECTORY_FALLBACK_DELAY_SECONDS"
    )
    demo_delivery_delay_seconds: float = Field(
        default=0.5, ge=0, alias="DEMO_DELIVERY_DELAY_SECONDS"
    )
