"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.visitors import VisitorAlertSettings

__all__ = [
    "VisitorAlertSettings",
]
