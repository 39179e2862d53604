"""Auth infrastructure adapters."""

from .jose_token_issuer import JoseTokenIssuer

__all__ = ["JoseTokenIssuer"]
