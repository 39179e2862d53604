"""Registry response models."""

from datetime import datetime
from typing import List

from .....api.schemas import CamelModel, OkResponse
from .....utils.redaction import destination_preview
from ...core.entities import RecipientRecord


class RegistryStatusResponse(OkResponse):
    """Liveness response with registry counts."""

    registered_users: int
    total_tokens: int


class RegisterResponse(OkResponse):
    uid: str
    token: str


class RecipientSummary(CamelModel):
    uid: str
    role: str
    token_preview: str
    registered_at: datetime

    @classmethod
    def from_domain(cls, record: RecipientRecord) -> "RecipientSummary":
        return cls(
            uid=record.identity,
            role=record.role,
            token_preview=destination_preview(record.destination),
            registered_at=record.registered_at,
        )


class RegistryListingResponse(OkResponse):
    total_users: int
    total_tokens: int
    users: List[RecipientSummary]
