"""Recipient record entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .....config.constants import DEFAULT_RECIPIENT_ROLE
from .....core.exceptions import RequiredFieldError
from .....utils.datetime import format_iso8601, utc_now


@dataclass(frozen=True)
class RecipientRecord:
    """One registered push destination for a recipient identity.

    A record is replaced, never mutated, when its identity registers again.
    """

    identity: str
    destination: str
    role: str = DEFAULT_RECIPIENT_ROLE
    registered_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        if not self.identity:
            raise RequiredFieldError("uid")
        if not self.destination:
            raise RequiredFieldError("token")
        if not self.role:
            object.__setattr__(self, "role", DEFAULT_RECIPIENT_ROLE)

    def has_role(self, role: Optional[str]) -> bool:
        """Case-insensitive role match."""
        if role is None:
            return False
        return self.role.strip().casefold() == role.strip().casefold()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the JSON file store."""
        return {
            "uid": self.identity,
            "token": self.destination,
            "role": self.role,
            "registeredAt": format_iso8601(self.registered_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RecipientRecord":
        """Rebuild a record written by to_dict()."""
        registered_at = data.get("registeredAt")
        if registered_at:
            registered_at = datetime.fromisoformat(registered_at.replace("Z", "+00:00"))
            if registered_at.tzinfo is None:
                registered_at = registered_at.replace(tzinfo=timezone.utc)
        return cls(
            identity=data.get("uid", ""),
            destination=data.get("token", ""),
            role=data.get("role") or DEFAULT_RECIPIENT_ROLE,
            registered_at=registered_at or utc_now(),
        )
