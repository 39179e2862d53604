"""Tests for the send-call and plain notification commands."""

from unittest.mock import AsyncMock

import pytest

from call_relay.core.exceptions import (
    NoRecipientsError,
    RequiredFieldError,
    TransportFailureError,
)
from call_relay.platform.dispatch.application.commands import SendCall, SendNotification
from call_relay.platform.dispatch.application.services import DeliveryAccountant, DispatchRouter
from call_relay.platform.dispatch.core.entities import NotificationIntent
from call_relay.platform.dispatch.core.protocols import SendResponse
from call_relay.platform.dispatch.core.value_objects import DeliveryStrategy


class TestSendCall:

    @pytest.fixture
    def command(self, store, mock_transport):
        return SendCall(
            router=DispatchRouter(store),
            transport=mock_transport,
            accountant=DeliveryAccountant(),
        )

    @pytest.mark.asyncio
    async def test_registered_doctor_gets_single_send(self, command, store, mock_transport):
        await store.register("d1", "tok-A", "doctor")

        outcome = await command.execute(
            NotificationIntent(patient_name="Jane", channel_id="room7", target_identity="d1")
        )

        assert outcome.strategy is DeliveryStrategy.SINGLE
        assert outcome.recipient == "d1"
        notification, destination = mock_transport.send.call_args.args
        assert destination == "tok-A"
        assert notification.data["channelId"] == "room7"
        mock_transport.send_multicast.assert_not_called()

    @pytest.mark.asyncio
    async def test_topic_send(self, command, mock_transport):
        outcome = await command.execute(
            NotificationIntent(patient_name="Jane", room_id="room7", use_topic=True)
        )

        assert outcome.strategy is DeliveryStrategy.TOPIC
        mock_transport.send_to_topic.assert_awaited_once()
        assert mock_transport.send_to_topic.call_args.args[1] == "doctors"

    @pytest.mark.asyncio
    async def test_multicast_partial_failure_is_not_an_error(self, command, store, mock_transport):
        await store.register("u1", "tok-A")
        await store.register("u2", "tok-B")
        mock_transport.send_multicast = AsyncMock(return_value=[
            SendResponse(success=True, message_id="m1"),
            SendResponse(success=False, error_code="NOT_FOUND", error_message="gone"),
        ])

        outcome = await command.execute(NotificationIntent(patient_name="Jane", channel_id="room7"))

        assert outcome.success_count == 1
        assert outcome.failure_count == 1
        assert mock_transport.send_multicast.call_args.args[1] == ("tok-A", "tok-B")

    @pytest.mark.asyncio
    async def test_unexpected_transport_error_becomes_transport_failure(self, command, store, mock_transport):
        await store.register("d1", "tok-A")
        mock_transport.send = AsyncMock(side_effect=RuntimeError("socket closed"))

        with pytest.raises(TransportFailureError) as exc_info:
            await command.execute(
                NotificationIntent(patient_name="Jane", channel_id="room7", target_identity="d1")
            )

        assert exc_info.value.message == "Push delivery failed"
        assert "socket" not in exc_info.value.message


class TestSendNotification:

    @pytest.fixture
    def command(self, store, mock_transport):
        return SendNotification(store, mock_transport, DeliveryAccountant())

    @pytest.mark.asyncio
    async def test_direct_send_uses_defaults(self, command, mock_transport):
        outcome = await command.to_token("raw-token")

        notification, destination = mock_transport.send.call_args.args
        assert destination == "raw-token"
        assert (notification.title, notification.body) == ("Test", "Hello")
        assert outcome.message_id == "projects/test/messages/single"

    @pytest.mark.asyncio
    async def test_direct_send_requires_token(self, command, mock_transport):
        with pytest.raises(RequiredFieldError):
            await command.to_token("  ")
        mock_transport.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_broadcast_to_all_registered(self, command, store, mock_transport):
        await store.register("u1", "tok-A")
        await store.register("u2", "tok-B")

        outcome = await command.to_all(title="Maintenance")

        notification, destinations = mock_transport.send_multicast.call_args.args
        assert destinations == ["tok-A", "tok-B"]
        assert (notification.title, notification.body) == ("Maintenance", "Hello everyone")
        assert outcome.success_count == 2

    @pytest.mark.asyncio
    async def test_broadcast_with_empty_registry(self, command, mock_transport):
        with pytest.raises(NoRecipientsError):
            await command.to_all()
        mock_transport.send_multicast.assert_not_called()
