"""Push transport protocol."""

from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence, runtime_checkable

from ..entities import CallNotification


@dataclass(frozen=True)
class SendResponse:
    """Provider response for one destination of a multi-destination send."""

    success: bool
    message_id: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None


@runtime_checkable
class PushTransport(Protocol):
    """Protocol for push delivery providers.

    Single and topic sends raise on failure. Multi-destination sends return
    one SendResponse per destination, in input order, and raise only when the
    whole batch could not be attempted.
    """

    async def send(self, notification: CallNotification, destination: str) -> str:
        """Send to one destination and return the provider message id."""
        ...

    async def send_to_topic(self, notification: CallNotification, topic: str) -> str:
        """Send to a broadcast topic and return the provider message id."""
        ...

    async def send_multicast(
        self,
        notification: CallNotification,
        destinations: Sequence[str]
    ) -> List[SendResponse]:
        """Send to many destinations, returning index-aligned responses."""
        ...
