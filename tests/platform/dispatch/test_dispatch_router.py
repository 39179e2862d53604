"""Tests for dispatch routing precedence."""

from unittest.mock import AsyncMock

import pytest

from call_relay.core.exceptions import NoRecipientsError
from call_relay.platform.dispatch.application.services import DispatchRouter
from call_relay.platform.dispatch.core.entities import NotificationIntent
from call_relay.platform.dispatch.core.value_objects import DeliveryStrategy


def make_intent(**overrides) -> NotificationIntent:
    values = {"patient_name": "Jane", "channel_id": "room7"}
    values.update(overrides)
    return NotificationIntent(**values)


class TestDispatchRouter:

    @pytest.fixture
    def router(self, store):
        return DispatchRouter(store, broadcast_topic="doctors", role_topics={"Doctor": "doctors", "nurse": "nurses"})

    @pytest.mark.asyncio
    async def test_registered_target_is_sent_directly(self, router, store):
        await store.register("d1", "tok-A", "doctor")
        await store.register("d2", "tok-B", "doctor")

        decision = await router.route(make_intent(target_identity="d1"))

        assert decision.strategy is DeliveryStrategy.SINGLE
        assert decision.destinations == ("tok-A",)
        assert decision.recipient.identity == "d1"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("hints", [
        {"use_topic": True},
        {"target_role": "nurse"},
        {"use_topic": True, "target_role": "nurse"},
    ])
    async def test_registered_target_wins_over_other_hints(self, router, store, hints):
        await store.register("d1", "tok-A", "doctor")

        decision = await router.route(make_intent(target_identity="d1", **hints))

        assert decision.strategy is DeliveryStrategy.SINGLE
        assert decision.destinations == ("tok-A",)

    @pytest.mark.asyncio
    async def test_unregistered_target_falls_back_to_full_broadcast(self, router, store):
        await store.register("d1", "tok-A", "doctor")
        await store.register("u1", "tok-B")

        decision = await router.route(make_intent(target_identity="ghost"))

        assert decision.strategy is DeliveryStrategy.TOKENS
        assert decision.destinations == ("tok-A", "tok-B")

    @pytest.mark.asyncio
    async def test_unregistered_target_with_topic_hint_uses_topic(self, router):
        decision = await router.route(make_intent(target_identity="ghost", use_topic=True))

        assert decision.strategy is DeliveryStrategy.TOPIC
        assert decision.topic == "doctors"

    @pytest.mark.asyncio
    async def test_topic_follows_role_table(self, router):
        decision = await router.route(make_intent(use_topic=True, target_role="NURSE"))
        assert decision.topic == "nurses"

    @pytest.mark.asyncio
    async def test_unknown_role_topic_uses_default(self, router):
        decision = await router.route(make_intent(use_topic=True, target_role="admin"))
        assert decision.topic == "doctors"

    @pytest.mark.asyncio
    async def test_topic_does_not_read_the_registry(self):
        store = AsyncMock()
        router = DispatchRouter(store)

        decision = await router.route(make_intent(use_topic=True))

        assert decision.strategy is DeliveryStrategy.TOPIC
        store.all_destinations.assert_not_called()
        store.list_by_role.assert_not_called()

    @pytest.mark.asyncio
    async def test_role_filter_selects_matching_records(self, router, store):
        await store.register("d1", "tok-A", "Doctor")
        await store.register("d2", "tok-A", "doctor")
        await store.register("p1", "tok-C", "patient")

        decision = await router.route(make_intent(target_role="doctor"))

        assert decision.strategy is DeliveryStrategy.TOKENS
        assert decision.destinations == ("tok-A",)

    @pytest.mark.asyncio
    async def test_role_filter_without_matches_is_no_recipients(self, router, store):
        await store.register("p1", "tok-C", "patient")

        with pytest.raises(NoRecipientsError) as exc_info:
            await router.route(make_intent(target_role="doctor"))

        assert "doctor" in exc_info.value.message
        assert exc_info.value.role == "doctor"

    @pytest.mark.asyncio
    async def test_empty_registry_is_no_recipients(self, router):
        with pytest.raises(NoRecipientsError):
            await router.route(make_intent())

    @pytest.mark.asyncio
    async def test_reregistered_destination_drops_out_of_broadcast(self, router, store):
        await store.register("d1", "tok-old")
        await store.register("d1", "tok-new")

        decision = await router.route(make_intent())

        assert decision.destinations == ("tok-new",)
