"""Tests for the fixed window rate limiter."""

import pytest

from call_relay.core.exceptions import RateLimitExceededError
from call_relay.platform.auth.infrastructure.limiters import FixedWindowRateLimiter, parse_rate_limit


class TestParseRateLimit:

    @pytest.mark.parametrize("value,expected", [
        ("100/minute", (100, 60)),
        ("5/5minute", (5, 300)),
        ("5/5minutes", (5, 300)),
        ("10 / hour", (10, 3600)),
        ("1/day", (1, 86400)),
    ])
    def test_valid_formats(self, value, expected):
        assert parse_rate_limit(value) == expected

    @pytest.mark.parametrize("value", ["five/minute", "5/fortnight", "5", "0/minute", "5/0minute"])
    def test_invalid_formats(self, value):
        with pytest.raises(ValueError):
            parse_rate_limit(value)


class TestFixedWindowRateLimiter:

    @pytest.mark.asyncio
    async def test_sixth_attempt_in_window_is_limited(self, rate_limiter, fake_clock):
        for expected_remaining in (4, 3, 2, 1, 0):
            assert await rate_limiter.hit("10.0.0.1") == expected_remaining
            fake_clock.advance(10)

        with pytest.raises(RateLimitExceededError) as exc_info:
            await rate_limiter.hit("10.0.0.1")

        assert exc_info.value.retry_after == 250

    @pytest.mark.asyncio
    async def test_window_resets_after_it_elapses(self, rate_limiter, fake_clock):
        for _ in range(5):
            await rate_limiter.hit("10.0.0.1")

        fake_clock.advance(300)

        assert await rate_limiter.hit("10.0.0.1") == 4

    @pytest.mark.asyncio
    async def test_clients_are_counted_separately(self, rate_limiter):
        for _ in range(5):
            await rate_limiter.hit("10.0.0.1")

        assert await rate_limiter.hit("10.0.0.2") == 4

    @pytest.mark.asyncio
    async def test_reset_clears_a_client(self, rate_limiter):
        for _ in range(5):
            await rate_limiter.hit("10.0.0.1")

        await rate_limiter.reset("10.0.0.1")

        assert await rate_limiter.hit("10.0.0.1") == 4

    @pytest.mark.asyncio
    async def test_oldest_live_window_is_dropped_at_capacity(self, fake_clock):
        limiter = FixedWindowRateLimiter(limit=5, window_seconds=60, clock=fake_clock, max_tracked_keys=2)
        await limiter.hit("a")
        fake_clock.advance(1)
        await limiter.hit("b")
        fake_clock.advance(1)
        await limiter.hit("c")

        assert set(limiter._windows) == {"b", "c"}

    @pytest.mark.asyncio
    async def test_known_client_is_not_evicted_at_capacity(self, fake_clock):
        limiter = FixedWindowRateLimiter(limit=5, window_seconds=60, clock=fake_clock, max_tracked_keys=2)
        await limiter.hit("a")
        await limiter.hit("b")

        assert await limiter.hit("a") == 3
        assert set(limiter._windows) == {"a", "b"}

    def test_capacity_must_be_positive(self):
        with pytest.raises(ValueError):
            FixedWindowRateLimiter(limit=5, window_seconds=60, max_tracked_keys=0)

    @pytest.mark.asyncio
    async def test_expired_windows_are_evicted_at_capacity(self, fake_clock):
        limiter = FixedWindowRateLimiter(limit=1, window_seconds=60, clock=fake_clock, max_tracked_keys=2)
        await limiter.hit("a")
        await limiter.hit("b")

        fake_clock.advance(61)
        await limiter.hit("c")

        assert set(limiter._windows) == {"c"}

    def test_from_string(self):
        limiter = FixedWindowRateLimiter.from_string("5/5minute")
        assert (limiter.limit, limiter.window_seconds) == (5, 300)
