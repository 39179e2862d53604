"""Collaborator call guard shared by dispatch commands."""

import logging
from typing import Awaitable, TypeVar

from .....core.exceptions import RelayError, TransportFailureError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def guarded_transport_call(call: Awaitable[T], operation: str) -> T:
    """Await a transport call, turning unexpected errors into TransportFailureError.

    Relay errors raised by the transport pass through unchanged. Anything else
    is logged with its traceback and replaced by a generic failure so provider
    details never reach the client.
    """
    try:
        return await call
    except RelayError:
        raise
    except Exception as e:
        logger.exception(f"Push transport error during {operation}: {e}")
        raise TransportFailureError("Push delivery failed", details={"operation": operation}) from e
