"""Dispatch application services."""

from .delivery_accountant import DeliveryAccountant
from .dispatch_router import DispatchRouter, RoutingDecision
from .payload_builder import CallPayloadBuilder

__all__ = [
    "DeliveryAccountant",
    "DispatchRouter",
    "RoutingDecision",
    "CallPayloadBuilder",
]
