"""Dispatch domain entities."""

from .call_notification import CallNotification
from .delivery_outcome import DeliveryOutcome, DestinationFailure
from .notification_intent import NotificationIntent

__all__ = [
    "CallNotification",
    "DeliveryOutcome",
    "DestinationFailure",
    "NotificationIntent",
]
