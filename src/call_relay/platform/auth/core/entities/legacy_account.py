"""Legacy account entity."""

from dataclasses import dataclass

from ..value_objects import StoredSecret


@dataclass(frozen=True)
class LegacyAccount:
    """An account from the legacy credential store."""

    username: str
    secret: StoredSecret
