"""Dispatch protocols."""

from .push_transport import PushTransport, SendResponse

__all__ = ["PushTransport", "SendResponse"]
