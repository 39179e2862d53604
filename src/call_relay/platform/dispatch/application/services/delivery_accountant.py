"""Delivery accounting for dispatch calls."""

import logging
from typing import Optional, Sequence

from .....core.exceptions import TransportFailureError
from .....utils.redaction import destination_preview
from ...core.entities import DeliveryOutcome, DestinationFailure
from ...core.protocols import SendResponse
from ...core.value_objects import DeliveryStrategy

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_CODE = "unknown-error"


class DeliveryAccountant:
    """Aggregates transport results into a DeliveryOutcome.

    Handles ONLY bookkeeping. Never retries and never raises for partial
    failures; full destinations are replaced by previews.
    """

    def tally(
        self,
        destinations: Sequence[str],
        responses: Sequence[SendResponse]
    ) -> DeliveryOutcome:
        """Account for a multi-destination send."""
        if len(responses) != len(destinations):
            raise TransportFailureError(
                "Push delivery failed",
                details={"reason": "result count does not match destination count"},
            )

        success_count = 0
        failures = []
        for destination, response in zip(destinations, responses):
            if response.success:
                success_count += 1
                continue
            failures.append(DestinationFailure(
                destination_preview=destination_preview(destination),
                error_code=response.error_code or UNKNOWN_ERROR_CODE,
                error_message=response.error_message or "Delivery failed",
            ))

        outcome = DeliveryOutcome(
            strategy=DeliveryStrategy.TOKENS,
            success_count=success_count,
            failure_count=len(failures),
            failures=failures,
        )
        if outcome.failure_count:
            logger.warning(
                f"Multicast delivered {outcome.success_count}/{outcome.total}, "
                f"{outcome.failure_count} failed"
            )
        else:
            logger.info(f"Multicast delivered {outcome.success_count}/{outcome.total}")
        return outcome

    def single(
        self,
        destination: str,
        message_id: str,
        recipient: Optional[str] = None
    ) -> DeliveryOutcome:
        """Account for a successful single-destination send."""
        logger.info(f"Sent message {message_id} to {destination_preview(destination)}")
        return DeliveryOutcome(
            strategy=DeliveryStrategy.SINGLE,
            success_count=1,
            failure_count=0,
            message_id=message_id,
            target=destination_preview(destination),
            recipient=recipient,
        )

    def topic(self, topic: str, message_id: str) -> DeliveryOutcome:
        """Account for a successful topic send."""
        logger.info(f"Sent message {message_id} to topic {topic}")
        return DeliveryOutcome(
            strategy=DeliveryStrategy.TOPIC,
            success_count=1,
            failure_count=0,
            message_id=message_id,
            target=topic,
        )
