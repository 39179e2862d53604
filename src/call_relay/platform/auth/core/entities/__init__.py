"""Auth domain entities."""

from .legacy_account import LegacyAccount

__all__ = ["LegacyAccount"]
