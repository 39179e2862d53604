"""Stored secret value object."""

import base64
import binascii
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional


class SecretScheme(str, Enum):
    """How a stored secret is encoded."""

    PBKDF2_SHA256 = "pbkdf2_sha256"
    # Deprecated: legacy records stored before hashing was introduced
    PLAINTEXT = "plaintext"


@dataclass(frozen=True)
class StoredSecret:
    """A stored account secret, resolved to its scheme when read.

    Hashed records use ``pbkdf2_sha256$<iterations>$<salt>$<base64 digest>``.
    Any value not in that format is a plaintext record.
    """

    scheme: SecretScheme
    raw: str
    iterations: Optional[int] = None
    salt: Optional[str] = None
    digest: Optional[bytes] = None

    SEPARATOR: ClassVar[str] = "$"

    @classmethod
    def parse(cls, raw: str) -> "StoredSecret":
        if raw is None:
            raise ValueError("Stored secret cannot be None")

        parts = raw.split(cls.SEPARATOR)
        if len(parts) == 4 and parts[0] == SecretScheme.PBKDF2_SHA256.value:
            _, iterations, salt, encoded_digest = parts
            try:
                iteration_count = int(iterations)
                digest = base64.b64decode(encoded_digest, validate=True)
            except (ValueError, binascii.Error):
                pass
            else:
                if iteration_count > 0 and salt and digest:
                    return cls(
                        scheme=SecretScheme.PBKDF2_SHA256,
                        raw=raw,
                        iterations=iteration_count,
                        salt=salt,
                        digest=digest,
                    )

        return cls(scheme=SecretScheme.PLAINTEXT, raw=raw)

    @property
    def is_hashed(self) -> bool:
        return self.scheme is SecretScheme.PBKDF2_SHA256

    @property
    def is_deprecated(self) -> bool:
        return self.scheme is SecretScheme.PLAINTEXT

    def __repr__(self) -> str:
        return f"StoredSecret(scheme={self.scheme.value!r})"
