"""Dispatch response models."""

from .....api.schemas import OkResponse


class SendCallHintResponse(OkResponse):
    message: str
    registered_tokens: int
