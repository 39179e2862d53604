"""Token issuer protocol."""

from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class TokenIssuer(Protocol):
    """Protocol for the identity provider that issues session tokens."""

    async def issue(self, identity: str, claims: Dict[str, Any]) -> str:
        """Issue a bearer token for identity carrying the extra claims."""
        ...
