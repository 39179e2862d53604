"""JWT token issuer backed by python-jose."""

import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Optional

from jose import jwt
from jose.exceptions import JWTError

from .....core.exceptions import ConfigurationError, IdentityProviderError
from .....utils.datetime import utc_now

logger = logging.getLogger(__name__)


class JoseTokenIssuer:
    """Issues signed JWT bearer tokens.

    Registered claims (sub, iat, exp and optionally iss) are always set by the
    issuer and cannot be overridden by the extra claims.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_in: int = 3600,
        issuer: Optional[str] = None,
        clock: Callable[[], datetime] = utc_now
    ):
        if not secret_key:
            raise ConfigurationError("Token signing key is not configured")
        if expires_in <= 0:
            raise ConfigurationError("Token lifetime must be positive")

        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expires_in = expires_in
        self.issuer = issuer
        self._clock = clock

    async def issue(self, identity: str, claims: Dict[str, Any]) -> str:
        issued_at = self._clock()
        payload: Dict[str, Any] = dict(claims)
        payload.update({
            "sub": identity,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + timedelta(seconds=self.expires_in)).timestamp()),
        })
        if self.issuer:
            payload["iss"] = self.issuer

        try:
            return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)
        except JWTError as e:
            logger.error(f"Failed to sign token: {e}")
            raise IdentityProviderError("Failed to sign token", details={"algorithm": self.algorithm}) from e
