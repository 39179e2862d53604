"""Dispatch request models."""

from typing import Optional, Union

from pydantic import AliasChoices, Field

from .....api.schemas import CamelModel
from ...core.entities import NotificationIntent

# Patient metadata arrives as strings or numbers depending on the client
Scalar = Union[str, int, float]


def _as_text(value: Optional[Scalar]) -> Optional[str]:
    return None if value is None else str(value)


class SendCallRequest(CamelModel):
    """Incoming-call dispatch body.

    Required fields are optional at the schema level; ``to_intent`` performs
    the domain validation so that missing values are reported as 400.
    """

    patient_name: Optional[str] = None
    channel_id: Optional[str] = None
    room_id: Optional[str] = None

    target_uid: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("targetUid", "target_uid", "targetIdentity"),
    )
    doctor_uid: Optional[str] = None
    target_role: Optional[str] = None
    use_topic: Optional[bool] = Field(
        default=False,
        validation_alias=AliasChoices("useTopic", "use_topic", "useBroadcastTopic"),
    )

    age: Optional[Scalar] = None
    sex: Optional[str] = None
    symptoms: Optional[str] = None
    address: Optional[str] = None
    submission_id: Optional[Scalar] = None
    agora_token: Optional[str] = None

    def to_intent(self) -> NotificationIntent:
        return NotificationIntent(
            patient_name=self.patient_name,
            channel_id=self.channel_id,
            room_id=self.room_id,
            target_identity=self.target_uid or self.doctor_uid,
            target_role=self.target_role,
            use_topic=bool(self.use_topic),
            age=_as_text(self.age),
            sex=self.sex,
            symptoms=self.symptoms,
            address=self.address,
            submission_id=_as_text(self.submission_id),
            agora_token=self.agora_token,
        )


class SendDirectRequest(CamelModel):
    """Plain notification to one raw device token."""

    token: Optional[str] = None
    title: Optional[str] = None
    body: Optional[str] = None


class SendAllRequest(CamelModel):
    """Plain notification to every registered device token."""

    title: Optional[str] = None
    body: Optional[str] = None
