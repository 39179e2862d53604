"""Send incoming-call notification command."""

import logging
from typing import Optional

from ...core.entities import DeliveryOutcome, NotificationIntent
from ...core.protocols import PushTransport
from ...core.value_objects import DeliveryStrategy
from ..services import CallPayloadBuilder, DeliveryAccountant, DispatchRouter
from .guard import guarded_transport_call

logger = logging.getLogger(__name__)


class SendCall:
    """Command to dispatch an incoming-call notification.

    Orchestrates routing, payload construction, delivery and accounting.
    The intent is validated on construction, before any registry read.
    """

    def __init__(
        self,
        router: DispatchRouter,
        transport: PushTransport,
        accountant: DeliveryAccountant,
        payload_builder: Optional[CallPayloadBuilder] = None
    ):
        self._router = router
        self._transport = transport
        self._accountant = accountant
        self._payload_builder = payload_builder or CallPayloadBuilder()

    async def execute(self, intent: NotificationIntent) -> DeliveryOutcome:
        decision = await self._router.route(intent)
        notification = self._payload_builder.build(intent)

        logger.info(
            f"Dispatching call for channel {intent.channel} via {decision.strategy.value}"
        )

        if decision.strategy is DeliveryStrategy.SINGLE:
            destination = decision.destinations[0]
            message_id = await guarded_transport_call(
                self._transport.send(notification, destination), "send"
            )
            return self._accountant.single(
                destination, message_id, recipient=decision.recipient.identity
            )

        if decision.strategy is DeliveryStrategy.TOPIC:
            message_id = await guarded_transport_call(
                self._transport.send_to_topic(notification, decision.topic), "send_to_topic"
            )
            return self._accountant.topic(decision.topic, message_id)

        responses = await guarded_transport_call(
            self._transport.send_multicast(notification, decision.destinations), "send_multicast"
        )
        return self._accountant.tally(decision.destinations, responses)
