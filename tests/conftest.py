"""Pytest configuration and fixtures for call relay tests."""

from datetime import datetime, timedelta, timezone
from typing import List, Sequence
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from call_relay.app import create_app
from call_relay.config.settings import RelaySettings
from call_relay.platform.auth.application.services import SecretVerifier
from call_relay.platform.auth.infrastructure.adapters import JoseTokenIssuer
from call_relay.platform.auth.infrastructure.limiters import FixedWindowRateLimiter
from call_relay.platform.auth.infrastructure.repositories import MemoryLegacyAccountStore
from call_relay.platform.dispatch.core.protocols import SendResponse
from call_relay.platform.registry.infrastructure.repositories import MemoryRecipientStore

TEST_JWT_SECRET = "test-signing-key"


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class TickingUtcClock:
    """UTC clock that moves one second forward on every read."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


def successful_multicast(notification, destinations: Sequence[str]) -> List[SendResponse]:
    return [
        SendResponse(success=True, message_id=f"projects/test/messages/{index}")
        for index, _ in enumerate(destinations)
    ]


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return RelaySettings(_env_file=None, environment="testing")


@pytest.fixture
def store():
    return MemoryRecipientStore(clock=TickingUtcClock())


@pytest.fixture
def mock_transport():
    """Push transport double that accepts every message."""
    transport = AsyncMock()
    transport.send = AsyncMock(return_value="projects/test/messages/single")
    transport.send_to_topic = AsyncMock(return_value="projects/test/messages/topic")
    transport.send_multicast = AsyncMock(side_effect=successful_multicast)
    return transport


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def rate_limiter(fake_clock):
    return FixedWindowRateLimiter(limit=5, window_seconds=300, clock=fake_clock)


@pytest.fixture
def verifier():
    # Low iteration count keeps the suite fast
    return SecretVerifier(iterations=1000)


@pytest.fixture
def account_store(verifier):
    return MemoryLegacyAccountStore({
        "alice": verifier.hash("correct horse"),
        "bob": "plain-secret",
    })


@pytest.fixture
def jwt_secret():
    return TEST_JWT_SECRET


@pytest.fixture
def token_issuer(jwt_secret):
    return JoseTokenIssuer(secret_key=jwt_secret, issuer="neo-call-relay")


@pytest.fixture
def app(settings, store, mock_transport, account_store, token_issuer, rate_limiter, verifier):
    return create_app(
        settings,
        recipient_store=store,
        push_transport=mock_transport,
        account_store=account_store,
        token_issuer=token_issuer,
        rate_limiter=rate_limiter,
        secret_verifier=verifier,
    )


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
