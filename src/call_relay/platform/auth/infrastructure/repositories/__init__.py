"""Legacy account repositories."""

from .memory_legacy_account_store import MemoryLegacyAccountStore

__all__ = ["MemoryLegacyAccountStore"]
