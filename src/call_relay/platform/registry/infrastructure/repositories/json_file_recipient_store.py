"""JSON file backed recipient store."""

import asyncio
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List

from .....config.constants import DEFAULT_RECIPIENT_ROLE
from .....core.exceptions import ConfigurationError, ExternalServiceError
from .....utils.datetime import utc_now
from ...core.entities import RecipientRecord
from .memory_recipient_store import MemoryRecipientStore

logger = logging.getLogger(__name__)


class JsonFileRecipientStore(MemoryRecipientStore):
    """Recipient registry persisted to a JSON file keyed by identity.

    Reads are served from memory; every registration rewrites the file while
    holding the write lock, and is only applied in memory once the file write
    succeeds.

    Two file layouts are accepted on load:
    - a list of record objects (``{"uid", "token", "role", "registeredAt"}``)
    - a bare list of token strings, migrated to records keyed by the token
    """

    def __init__(
        self,
        path: Path,
        default_role: str = DEFAULT_RECIPIENT_ROLE,
        clock: Callable[[], datetime] = utc_now
    ):
        self.path = Path(path)
        super().__init__(default_role=default_role, clock=clock)
        for record in self._load():
            self._records[record.identity] = record

    def _load(self) -> List[RecipientRecord]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []

        try:
            entries = json.loads(raw or "[]")
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Registry file {self.path} is not valid JSON",
                details={"path": str(self.path)},
            ) from e

        if isinstance(entries, dict):
            entries = list(entries.values())
        if not isinstance(entries, list):
            raise ConfigurationError(
                f"Registry file {self.path} must contain a JSON list",
                details={"path": str(self.path)},
            )

        try:
            records = [self._parse_entry(entry) for entry in entries]
        except (AttributeError, TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Registry file {self.path} holds an unreadable entry: {e}",
                details={"path": str(self.path)},
            ) from e
        logger.info(f"Loaded {len(records)} recipient(s) from {self.path}")
        return records

    def _parse_entry(self, entry: Any) -> RecipientRecord:
        if isinstance(entry, str):
            return RecipientRecord(identity=entry, destination=entry, role=self.default_role)
        return RecipientRecord.from_dict(entry)

    async def _persist(self, records: Dict[str, RecipientRecord]) -> None:
        payload = [record.to_dict() for record in records.values()]
        try:
            await asyncio.to_thread(self._write, payload)
        except OSError as e:
            logger.error(f"Failed to write registry file {self.path}: {e}")
            raise ExternalServiceError(
                "Failed to persist registration",
                details={"path": str(self.path)},
            ) from e

    def _write(self, payload: List[dict]) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)
