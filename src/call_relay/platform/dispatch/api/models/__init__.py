"""Dispatch API models."""

from .requests import SendAllRequest, SendCallRequest, SendDirectRequest
from .responses import SendCallHintResponse

__all__ = [
    "SendAllRequest",
    "SendCallRequest",
    "SendDirectRequest",
    "SendCallHintResponse",
]
