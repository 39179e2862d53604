"""Notification intent entity."""

from dataclasses import dataclass
from typing import Optional

from .....core.exceptions import RequiredFieldError, ValidationError


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass(frozen=True)
class NotificationIntent:
    """A request to notify recipients about an incoming call.

    Carries the call context, optional routing hints and optional patient
    metadata. Construction validates the call context, so an intent that
    exists is always routable.
    """

    patient_name: str
    channel_id: Optional[str] = None
    room_id: Optional[str] = None

    # Routing hints
    target_identity: Optional[str] = None
    target_role: Optional[str] = None
    use_topic: bool = False

    # Metadata
    age: Optional[str] = None
    sex: Optional[str] = None
    symptoms: Optional[str] = None
    address: Optional[str] = None
    submission_id: Optional[str] = None
    agora_token: Optional[str] = None

    def __post_init__(self) -> None:
        for name in (
            "patient_name", "channel_id", "room_id", "target_identity", "target_role",
            "age", "sex", "symptoms", "address", "submission_id", "agora_token",
        ):
            object.__setattr__(self, name, _clean(getattr(self, name)))

        if not self.patient_name:
            raise RequiredFieldError("patientName")
        if not self.channel_id and not self.room_id:
            raise ValidationError(
                "missing channelId or roomId",
                details={"fields": ["channelId", "roomId"]},
            )

    @property
    def channel(self) -> str:
        """Normalized channel identifier: channelId, else roomId."""
        return self.channel_id or self.room_id
