"""Dispatch routing: choose a delivery strategy and its destinations."""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .....config.constants import DEFAULT_BROADCAST_TOPIC, DEFAULT_ROLE_TOPICS
from .....core.exceptions import NoRecipientsError
from ....registry.core.entities import RecipientRecord
from ....registry.core.protocols import RecipientStore
from ...core.entities import NotificationIntent
from ...core.value_objects import DeliveryStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoutingDecision:
    """Strategy and targets chosen for one intent.

    ``destinations`` is fixed at decision time; registrations arriving later
    are not part of this dispatch.
    """

    strategy: DeliveryStrategy
    destinations: Tuple[str, ...] = ()
    topic: Optional[str] = None
    recipient: Optional[RecipientRecord] = None


class DispatchRouter:
    """Turns a NotificationIntent into exactly one RoutingDecision.

    Precedence, first match wins:
    1. a registered target identity -> SINGLE
    2. an explicit topic request -> TOPIC
    3. otherwise TOKENS over the role-filtered or full registry

    A named target without a registration is a soft miss and falls through.
    An empty TOKENS destination set raises NoRecipientsError.
    """

    def __init__(
        self,
        store: RecipientStore,
        broadcast_topic: str = DEFAULT_BROADCAST_TOPIC,
        role_topics: Optional[Mapping[str, str]] = None
    ):
        self._store = store
        self.broadcast_topic = broadcast_topic
        self.role_topics = {
            role.strip().lower(): topic
            for role, topic in (DEFAULT_ROLE_TOPICS if role_topics is None else role_topics).items()
        }

    def topic_for_role(self, role: Optional[str]) -> str:
        """Broadcast topic for a recipient class, falling back to the default topic."""
        if role:
            return self.role_topics.get(role.strip().lower(), self.broadcast_topic)
        return self.broadcast_topic

    async def route(self, intent: NotificationIntent) -> RoutingDecision:
        if intent.target_identity:
            record = await self._store.lookup(intent.target_identity)
            if record is not None:
                return RoutingDecision(
                    strategy=DeliveryStrategy.SINGLE,
                    destinations=(record.destination,),
                    recipient=record,
                )
            logger.warning(
                f"Target {intent.target_identity} has no registered token, falling back to broadcast"
            )

        if intent.use_topic:
            return RoutingDecision(
                strategy=DeliveryStrategy.TOPIC,
                topic=self.topic_for_role(intent.target_role),
            )

        if intent.target_role:
            records = await self._store.list_by_role(intent.target_role)
            destinations = tuple(dict.fromkeys(record.destination for record in records))
        else:
            destinations = tuple(await self._store.all_destinations())

        if not destinations:
            raise NoRecipientsError(role=intent.target_role)

        return RoutingDecision(strategy=DeliveryStrategy.TOKENS, destinations=destinations)
