"""Delivery outcome entity."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..value_objects import DeliveryStrategy


@dataclass(frozen=True)
class DestinationFailure:
    """One failed destination of a multi-destination send."""

    destination_preview: str
    error_code: str
    error_message: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "tokenPreview": self.destination_preview,
            "code": self.error_code,
            "message": self.error_message,
        }


@dataclass(frozen=True)
class DeliveryOutcome:
    """Result of one dispatch call.

    A non-zero ``failure_count`` is a partial delivery failure, not an error:
    callers inspect the counts.
    """

    strategy: DeliveryStrategy
    success_count: int
    failure_count: int
    failures: List[DestinationFailure] = field(default_factory=list)
    message_id: Optional[str] = None
    target: Optional[str] = None
    recipient: Optional[str] = None

    @property
    def total(self) -> int:
        return self.success_count + self.failure_count

    @property
    def is_partial_failure(self) -> bool:
        return self.success_count > 0 and self.failure_count > 0

    def to_response(self) -> Dict[str, Any]:
        """Response body fields, keyed the way HTTP clients expect them."""
        body: Dict[str, Any] = {"ok": True, "method": self.strategy.value}
        if self.strategy is DeliveryStrategy.TOKENS:
            body.update({
                "successCount": self.success_count,
                "failureCount": self.failure_count,
                "errors": [failure.to_dict() for failure in self.failures],
            })
        elif self.strategy is DeliveryStrategy.TOPIC:
            body.update({"topic": self.target, "messageId": self.message_id})
        else:
            body.update({
                "uid": self.recipient,
                "tokenPreview": self.target,
                "messageId": self.message_id,
            })
        return body
