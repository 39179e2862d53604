"""Auth protocols."""

from .legacy_account_store import LegacyAccountStore
from .token_issuer import TokenIssuer

__all__ = ["LegacyAccountStore", "TokenIssuer"]
