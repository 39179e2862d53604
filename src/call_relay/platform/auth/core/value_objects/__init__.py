"""Auth value objects."""

from .stored_secret import SecretScheme, StoredSecret

__all__ = ["SecretScheme", "StoredSecret"]
