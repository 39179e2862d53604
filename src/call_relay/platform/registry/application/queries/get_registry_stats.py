"""Registry statistics query."""

from dataclasses import dataclass

from ...core.protocols import RecipientStore


@dataclass(frozen=True)
class RegistryStats:
    registered_users: int
    total_tokens: int


class GetRegistryStats:
    """Query registry counts for liveness and introspection endpoints."""

    def __init__(self, store: RecipientStore):
        self._store = store

    async def execute(self) -> RegistryStats:
        return RegistryStats(
            registered_users=await self._store.size(),
            total_tokens=await self._store.destination_count(),
        )
