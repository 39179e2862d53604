"""Registry protocols."""

from .recipient_store import RecipientStore

__all__ = ["RecipientStore"]
