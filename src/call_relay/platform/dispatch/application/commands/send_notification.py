"""Plain notification commands for direct and broadcast sends."""

from typing import Optional

from .....core.exceptions import NoRecipientsError, RequiredFieldError
from ....registry.core.protocols import RecipientStore
from ...core.entities import CallNotification, DeliveryOutcome
from ...core.protocols import PushTransport
from ..services import DeliveryAccountant
from .guard import guarded_transport_call

DEFAULT_DIRECT_TITLE = "Test"
DEFAULT_DIRECT_BODY = "Hello"
DEFAULT_BROADCAST_TITLE = "Broadcast"
DEFAULT_BROADCAST_BODY = "Hello everyone"


class SendNotification:
    """Command to send a plain title/body notification.

    Used for manual testing of device tokens: either one raw token, which
    need not be registered, or every registered destination.
    """

    def __init__(
        self,
        store: RecipientStore,
        transport: PushTransport,
        accountant: DeliveryAccountant
    ):
        self._store = store
        self._transport = transport
        self._accountant = accountant

    async def to_token(
        self,
        token: Optional[str],
        title: Optional[str] = None,
        body: Optional[str] = None
    ) -> DeliveryOutcome:
        token = (token or "").strip()
        if not token:
            raise RequiredFieldError("token")

        notification = CallNotification(
            title=title or DEFAULT_DIRECT_TITLE,
            body=body or DEFAULT_DIRECT_BODY,
        )
        message_id = await guarded_transport_call(self._transport.send(notification, token), "send")
        return self._accountant.single(token, message_id)

    async def to_all(
        self,
        title: Optional[str] = None,
        body: Optional[str] = None
    ) -> DeliveryOutcome:
        destinations = await self._store.all_destinations()
        if not destinations:
            raise NoRecipientsError()

        notification = CallNotification(
            title=title or DEFAULT_BROADCAST_TITLE,
            body=body or DEFAULT_BROADCAST_BODY,
        )
        responses = await guarded_transport_call(
            self._transport.send_multicast(notification, destinations), "send_multicast"
        )
        return self._accountant.tally(destinations, responses)
