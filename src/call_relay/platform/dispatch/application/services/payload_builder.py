"""Incoming-call payload builder."""

from datetime import datetime
from typing import Callable, Dict, Optional

from .....config.constants import INCOMING_CALL_EVENT, INCOMING_CALL_TITLE
from .....utils.datetime import format_iso8601, utc_now
from ...core.entities import CallNotification, NotificationIntent


class CallPayloadBuilder:
    """Builds the single notification sent for an intent.

    The payload does not depend on the delivery strategy, so it is built once
    per dispatch.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self._clock = clock

    def build(self, intent: NotificationIntent) -> CallNotification:
        data: Dict[str, Optional[str]] = {
            "type": INCOMING_CALL_EVENT,
            "channelId": intent.channel,
            "roomId": intent.room_id or intent.channel,
            "agoraToken": intent.agora_token,
            "doctorUid": intent.target_identity,
            "submissionId": intent.submission_id,
            "patientName": intent.patient_name,
            "age": intent.age,
            "sex": intent.sex,
            "symptoms": intent.symptoms,
            "address": intent.address,
            "sentAt": format_iso8601(self._clock()),
        }
        return CallNotification(
            title=INCOMING_CALL_TITLE,
            body=f"{intent.patient_name} is calling",
            data={key: value or "" for key, value in data.items()},
        )
