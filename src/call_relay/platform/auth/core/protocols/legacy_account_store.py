"""Legacy account store protocol."""

from typing import Optional, Protocol, runtime_checkable

from ..entities import LegacyAccount


@runtime_checkable
class LegacyAccountStore(Protocol):
    """Protocol for looking up legacy accounts by username."""

    async def get(self, username: str) -> Optional[LegacyAccount]:
        """Get the account for username, if it exists."""
        ...
