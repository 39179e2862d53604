"""Dispatch value objects."""

from .delivery_strategy import DeliveryStrategy

__all__ = ["DeliveryStrategy"]
