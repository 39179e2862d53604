"""Register recipient command."""

from dataclasses import dataclass
from typing import Optional

from .....core.exceptions import RequiredFieldError
from ...core.entities import RecipientRecord
from ...core.protocols import RecipientStore


@dataclass
class RegisterRecipientRequest:
    """Request to register a push destination for an identity."""

    uid: Optional[str]
    token: Optional[str]
    role: Optional[str] = None


class RegisterRecipient:
    """Command to upsert a recipient registration.

    Handles ONLY input validation and delegation to the store. Missing fields
    are rejected before the store is touched.
    """

    def __init__(self, store: RecipientStore):
        self._store = store

    async def execute(self, request: RegisterRecipientRequest) -> RecipientRecord:
        uid = (request.uid or "").strip()
        token = (request.token or "").strip()
        if not uid:
            raise RequiredFieldError("uid")
        if not token:
            raise RequiredFieldError("token")

        role = (request.role or "").strip() or None
        return await self._store.register(uid, token, role)
