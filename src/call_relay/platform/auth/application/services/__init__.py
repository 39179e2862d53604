"""Auth application services."""

from .secret_verifier import SecretVerifier

__all__ = ["SecretVerifier"]
