"""Request rate limiters."""

from .fixed_window_rate_limiter import FixedWindowRateLimiter, parse_rate_limit

__all__ = ["FixedWindowRateLimiter", "parse_rate_limit"]
