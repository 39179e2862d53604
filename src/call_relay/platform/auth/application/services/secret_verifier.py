"""Secret hashing and verification."""

import base64
import hmac
import logging
import secrets
from typing import Optional, Union

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ...core.value_objects import SecretScheme, StoredSecret

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 600_000
DIGEST_LENGTH = 32


class SecretVerifier:
    """Compares candidate secrets against stored ones.

    Hashed records are verified through PBKDF2-HMAC-SHA256, whose verify()
    compares in constant time. Plaintext records are compared for exact
    equality; that path only exists for accounts not yet migrated to hashes
    and is deprecated.
    """

    def __init__(self, iterations: int = DEFAULT_ITERATIONS):
        if iterations <= 0:
            raise ValueError("iterations must be positive")
        self.iterations = iterations
        self._dummy_secret: Optional[StoredSecret] = None

    def dummy_secret(self) -> StoredSecret:
        """Hashed secret of a random value, for checks against unknown accounts.

        Verifying against it costs the same as verifying a real account.
        """
        if self._dummy_secret is None:
            self._dummy_secret = StoredSecret.parse(self.hash(secrets.token_urlsafe(16)))
        return self._dummy_secret

    @staticmethod
    def _kdf(salt: str, iterations: int, length: int = DIGEST_LENGTH) -> PBKDF2HMAC:
        return PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=length,
            salt=salt.encode("utf-8"),
            iterations=iterations,
        )

    def hash(self, secret: str, salt: Optional[str] = None, iterations: Optional[int] = None) -> str:
        """Hash a secret into the stored pbkdf2_sha256 format."""
        salt = salt or secrets.token_hex(16)
        iterations = iterations or self.iterations
        digest = self._kdf(salt, iterations).derive(secret.encode("utf-8"))
        return StoredSecret.SEPARATOR.join([
            SecretScheme.PBKDF2_SHA256.value,
            str(iterations),
            salt,
            base64.b64encode(digest).decode("ascii"),
        ])

    def verify(self, candidate: str, stored: Union[str, StoredSecret]) -> bool:
        """Check a candidate secret against a stored secret of either scheme."""
        if candidate is None:
            return False
        if isinstance(stored, str):
            stored = StoredSecret.parse(stored)

        if stored.is_hashed:
            kdf = self._kdf(stored.salt, stored.iterations, length=len(stored.digest))
            try:
                kdf.verify(candidate.encode("utf-8"), stored.digest)
            except InvalidKey:
                return False
            return True

        # Deprecated plaintext comparison for records not yet migrated
        logger.warning("Verifying against a plaintext stored secret; rehash this account")
        return hmac.compare_digest(candidate.encode("utf-8"), stored.raw.encode("utf-8"))
