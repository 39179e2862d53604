"""List recipients query."""

from dataclasses import dataclass
from typing import List

from ...core.entities import RecipientRecord
from ...core.protocols import RecipientStore


@dataclass(frozen=True)
class RecipientListing:
    """Snapshot of the registry for diagnostics."""

    records: List[RecipientRecord]
    total_users: int
    total_tokens: int


class ListRecipients:
    """Query the whole registry, sorted by most recent registration first."""

    def __init__(self, store: RecipientStore):
        self._store = store

    async def execute(self) -> RecipientListing:
        records = await self._store.snapshot()
        records.sort(key=lambda record: record.registered_at, reverse=True)
        distinct_destinations = {record.destination for record in records}
        return RecipientListing(
            records=records,
            total_users=len(records),
            total_tokens=len(distinct_destinations),
        )
