"""In-memory recipient store."""

import asyncio
import logging
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional

from .....config.constants import DEFAULT_RECIPIENT_ROLE
from .....utils.datetime import utc_now
from .....utils.redaction import destination_preview
from ...core.entities import RecipientRecord

logger = logging.getLogger(__name__)


class MemoryRecipientStore:
    """Volatile recipient registry held in process memory.

    Handles ONLY record storage and snapshot reads. Registrations are
    serialized through a lock; reads copy the current mapping without it.
    Contents are lost on restart.
    """

    def __init__(
        self,
        default_role: str = DEFAULT_RECIPIENT_ROLE,
        clock: Callable[[], datetime] = utc_now,
        records: Optional[Iterable[RecipientRecord]] = None
    ):
        self.default_role = default_role
        self._clock = clock
        self._records: Dict[str, RecipientRecord] = {}
        self._lock = asyncio.Lock()

        for record in records or ():
            self._records[record.identity] = record

    async def register(
        self,
        identity: str,
        destination: str,
        role: Optional[str] = None
    ) -> RecipientRecord:
        record = RecipientRecord(
            identity=identity,
            destination=destination,
            role=role or self.default_role,
            registered_at=self._clock(),
        )
        async with self._lock:
            previous = self._records.get(identity)
            updated = dict(self._records)
            updated[identity] = record
            await self._persist(updated)
            self._records = updated

        if previous and previous.destination != destination:
            logger.info(
                f"Replaced destination for {identity}: "
                f"{destination_preview(previous.destination)} -> {destination_preview(destination)}"
            )
        else:
            logger.info(f"Registered {identity} ({record.role}): {destination_preview(destination)}")
        return record

    async def _persist(self, records: Dict[str, RecipientRecord]) -> None:
        """Hook run under the write lock with the mapping about to be committed.

        Raising leaves the current mapping untouched.
        """
        return None

    async def lookup(self, identity: str) -> Optional[RecipientRecord]:
        if not identity:
            return None
        return self._records.get(identity)

    async def list_by_role(self, role: str) -> List[RecipientRecord]:
        return [record for record in list(self._records.values()) if record.has_role(role)]

    async def all_destinations(self) -> List[str]:
        # dict.fromkeys keeps first-seen order while collapsing duplicates
        return list(dict.fromkeys(record.destination for record in list(self._records.values())))

    async def snapshot(self) -> List[RecipientRecord]:
        return list(self._records.values())

    async def size(self) -> int:
        return len(self._records)

    async def destination_count(self) -> int:
        return len(await self.all_destinations())
