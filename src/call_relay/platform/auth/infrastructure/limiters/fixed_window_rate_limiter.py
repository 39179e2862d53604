"""Fixed window rate limiter keyed by client."""

import asyncio
import logging
import math
import re
import time
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from .....core.exceptions import RateLimitExceededError

logger = logging.getLogger(__name__)

PERIOD_SECONDS = {
    "second": 1,
    "minute": 60,
    "hour": 3600,
    "day": 86400,
}

_RATE_LIMIT_PATTERN = re.compile(r"^\s*(\d+)\s*/\s*(\d*)\s*([a-z]+?)s?\s*$")


def parse_rate_limit(rate_limit_str: str) -> Tuple[int, int]:
    """Parse a rate limit string (e.g. '100/minute', '5/5minute') to (count, seconds)."""
    match = _RATE_LIMIT_PATTERN.match(rate_limit_str.lower())
    if not match:
        raise ValueError(f"Invalid rate limit format: {rate_limit_str}")

    count, multiplier, period = match.groups()
    if period not in PERIOD_SECONDS:
        raise ValueError(f"Invalid period: {period}")

    count = int(count)
    multiplier = int(multiplier) if multiplier else 1
    if count <= 0 or multiplier <= 0:
        raise ValueError(f"Rate limit values must be positive: {rate_limit_str}")

    return count, multiplier * PERIOD_SECONDS[period]


@dataclass
class _Window:
    started_at: float
    hits: int = 0


class FixedWindowRateLimiter:
    """Counts attempts per key within fixed windows.

    A key's window opens at its first attempt and lasts ``window_seconds``;
    once it elapses the count starts over. Every attempt counts, successful
    or not.

    At most ``max_tracked_keys`` windows are held; beyond that the oldest
    window is dropped.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
        max_tracked_keys: int = 10000
    ):
        if limit <= 0:
            raise ValueError("limit must be positive")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        if max_tracked_keys <= 0:
            raise ValueError("max_tracked_keys must be positive")

        self.limit = limit
        self.window_seconds = window_seconds
        self.max_tracked_keys = max_tracked_keys
        self._clock = clock
        self._windows: Dict[str, _Window] = {}
        self._lock = asyncio.Lock()

    @classmethod
    def from_string(cls, rate_limit_str: str, **kwargs) -> "FixedWindowRateLimiter":
        limit, window_seconds = parse_rate_limit(rate_limit_str)
        return cls(limit, window_seconds, **kwargs)

    async def hit(self, key: str) -> int:
        """Record an attempt for key.

        Returns:
            Remaining attempts in the current window

        Raises:
            RateLimitExceededError: When the key has used up its window
        """
        async with self._lock:
            now = self._clock()
            window = self._windows.get(key)
            if window is None or now - window.started_at >= self.window_seconds:
                if window is None and len(self._windows) >= self.max_tracked_keys:
                    self._evict(now)
                window = _Window(started_at=now)
                self._windows[key] = window

            if window.hits >= self.limit:
                retry_after = max(1, math.ceil(window.started_at + self.window_seconds - now))
                logger.warning(f"Rate limit exceeded: key={key}")
                raise RateLimitExceededError(retry_after=retry_after)

            window.hits += 1
            return self.limit - window.hits

    async def reset(self, key: str) -> None:
        async with self._lock:
            self._windows.pop(key, None)

    def _evict(self, now: float) -> None:
        """Drop expired windows, or the oldest live one when none has expired."""
        expired = [
            key for key, window in self._windows.items()
            if now - window.started_at >= self.window_seconds
        ]
        if not expired:
            oldest = min(self._windows, key=lambda key: self._windows[key].started_at)
            logger.warning(f"Rate limiter tracking {len(self._windows)} clients, evicting {oldest}")
            expired = [oldest]
        for key in expired:
            del self._windows[key]
