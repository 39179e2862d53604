"""Auth commands."""

from .legacy_login import LegacyLogin, LegacyLoginResult

__all__ = ["LegacyLogin", "LegacyLoginResult"]
