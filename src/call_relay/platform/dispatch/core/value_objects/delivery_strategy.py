"""Delivery strategy value object."""

from enum import Enum


class DeliveryStrategy(str, Enum):
    """Delivery mode chosen for one dispatch call."""

    SINGLE = "single"   # one registered recipient addressed directly
    TOPIC = "topic"     # provider-side broadcast topic
    TOKENS = "tokens"   # explicit list of registered destinations
