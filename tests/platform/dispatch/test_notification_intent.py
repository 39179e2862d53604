"""Tests for notification intent validation."""

import pytest

from call_relay.core.exceptions import RequiredFieldError, ValidationError
from call_relay.platform.dispatch.core.entities import NotificationIntent


class TestNotificationIntent:

    def test_channel_prefers_channel_id(self):
        intent = NotificationIntent(patient_name="Jane", channel_id="c1", room_id="r1")
        assert intent.channel == "c1"

    def test_channel_falls_back_to_room_id(self):
        intent = NotificationIntent(patient_name="Jane", room_id="room7")
        assert intent.channel == "room7"

    def test_strips_and_blanks_optional_fields(self):
        intent = NotificationIntent(
            patient_name="  Jane ",
            channel_id="room7",
            target_identity="   ",
            target_role=" doctor ",
        )
        assert intent.patient_name == "Jane"
        assert intent.target_identity is None
        assert intent.target_role == "doctor"

    @pytest.mark.parametrize("patient_name", [None, "", "   "])
    def test_requires_patient_name(self, patient_name):
        with pytest.raises(RequiredFieldError) as exc_info:
            NotificationIntent(patient_name=patient_name, channel_id="room7")
        assert exc_info.value.field == "patientName"

    def test_requires_a_channel_like_id(self):
        with pytest.raises(ValidationError) as exc_info:
            NotificationIntent(patient_name="Jane", channel_id=" ", room_id=None)
        assert "channelId" in exc_info.value.message
