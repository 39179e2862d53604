"""Legacy login command."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from .....config.constants import LEGACY_IDENTITY_PREFIX
from .....core.exceptions import (
    IdentityProviderError,
    InvalidCredentialsError,
    RelayError,
    RequiredFieldError,
)
from .....utils.redaction import mask_username
from ...core.entities import LegacyAccount
from ...core.protocols import LegacyAccountStore, TokenIssuer
from ...infrastructure.limiters import FixedWindowRateLimiter
from ..services import SecretVerifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LegacyLoginResult:
    """Issued token and the namespaced identity it was issued for."""

    token: str
    identity: str


class LegacyLogin:
    """Command to authenticate a legacy account and issue a session token.

    Handles ONLY:
    - Charging the attempt to the caller's rate limit window
    - Verifying the username/secret pair
    - Asking the identity provider for a token

    Every attempt counts against the limit, including malformed ones, and the
    limit is checked before the account store is consulted. Unknown usernames
    and wrong secrets produce the same error.
    """

    def __init__(
        self,
        account_store: LegacyAccountStore,
        token_issuer: TokenIssuer,
        rate_limiter: FixedWindowRateLimiter,
        identity_prefix: str = LEGACY_IDENTITY_PREFIX,
        verifier: Optional[SecretVerifier] = None
    ):
        self._account_store = account_store
        self._token_issuer = token_issuer
        self._rate_limiter = rate_limiter
        self._identity_prefix = identity_prefix
        self._verifier = verifier or SecretVerifier()

    async def execute(
        self,
        username: Optional[str],
        password: Optional[str],
        client_address: str
    ) -> LegacyLoginResult:
        await self._rate_limiter.hit(client_address)

        username = (username or "").strip()
        if not username:
            raise RequiredFieldError("username")
        if not password:
            raise RequiredFieldError("password")

        account = await self._account_store.get(username)
        # KDF work runs off the event loop; unknown users are checked against a dummy hash
        verified = await asyncio.to_thread(self._check_secret, password, account)
        if account is None or not verified:
            logger.info(f"Legacy login rejected for {mask_username(username)} from {client_address}")
            raise InvalidCredentialsError()

        if account.secret.is_deprecated:
            logger.warning(f"Legacy account {mask_username(username)} still uses a plaintext secret")

        identity = f"{self._identity_prefix}{username}"
        try:
            token = await self._token_issuer.issue(identity, {"legacy": True, "username": username})
        except RelayError:
            raise
        except Exception as e:
            logger.exception(f"Token issuance failed for {mask_username(username)}")
            raise IdentityProviderError("Failed to issue token") from e

        logger.info(f"Legacy login succeeded for {mask_username(username)}")
        return LegacyLoginResult(token=token, identity=identity)

    def _check_secret(self, password: str, account: Optional[LegacyAccount]) -> bool:
        if account is None:
            self._verifier.verify(password, self._verifier.dummy_secret())
            return False
        return self._verifier.verify(password, account.secret)
