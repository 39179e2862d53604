"""Recipient store protocol."""

from typing import List, Optional, Protocol, runtime_checkable

from ..entities import RecipientRecord


@runtime_checkable
class RecipientStore(Protocol):
    """Protocol for recipient registry storage.

    Implementations guarantee upsert-by-identity (latest registration wins)
    and snapshot reads: every read returns a copy taken at call time.
    """

    async def register(
        self,
        identity: str,
        destination: str,
        role: Optional[str] = None
    ) -> RecipientRecord:
        """Insert or replace the record for identity."""
        ...

    async def lookup(self, identity: str) -> Optional[RecipientRecord]:
        """Get the record registered for identity, if any."""
        ...

    async def list_by_role(self, role: str) -> List[RecipientRecord]:
        """Get records whose role matches, ignoring case."""
        ...

    async def all_destinations(self) -> List[str]:
        """Get distinct destinations currently registered."""
        ...

    async def snapshot(self) -> List[RecipientRecord]:
        """Get every registered record."""
        ...

    async def size(self) -> int:
        """Count of distinct identities."""
        ...

    async def destination_count(self) -> int:
        """Count of distinct destinations."""
        ...
