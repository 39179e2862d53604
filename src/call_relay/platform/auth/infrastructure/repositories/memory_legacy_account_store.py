"""In-memory legacy account store."""

import json
import logging
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from .....core.exceptions import ConfigurationError
from ...core.entities import LegacyAccount
from ...core.value_objects import StoredSecret

logger = logging.getLogger(__name__)


class MemoryLegacyAccountStore:
    """Read-only account store loaded once at startup.

    Accounts are given as ``username -> stored secret``; each stored secret is
    resolved to its scheme on load.
    """

    def __init__(self, accounts: Optional[Mapping[str, str]] = None):
        self._accounts: Dict[str, LegacyAccount] = {}
        for username, raw_secret in (accounts or {}).items():
            self._accounts[username] = LegacyAccount(
                username=username,
                secret=StoredSecret.parse(raw_secret),
            )

        deprecated = sum(1 for account in self._accounts.values() if account.secret.is_deprecated)
        if deprecated:
            logger.warning(f"{deprecated} legacy account(s) use deprecated plaintext secrets")

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "MemoryLegacyAccountStore":
        """Load accounts from a JSON object, or a list of {username, password} entries."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise ConfigurationError(f"Legacy accounts file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Legacy accounts file is not valid JSON: {path}") from e

        if isinstance(data, list):
            try:
                data = {entry["username"]: entry["password"] for entry in data}
            except (KeyError, TypeError) as e:
                raise ConfigurationError(
                    "Legacy account entries need 'username' and 'password'"
                ) from e
        elif not isinstance(data, dict):
            raise ConfigurationError(f"Unsupported legacy accounts format in {path}")

        store = cls({str(username): str(secret) for username, secret in data.items()})
        logger.info(f"Loaded {len(store)} legacy account(s) from {path}")
        return store

    async def get(self, username: str) -> Optional[LegacyAccount]:
        return self._accounts.get(username)

    def __len__(self) -> int:
        return len(self._accounts)
