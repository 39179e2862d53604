"""Registry domain entities."""

from .recipient_record import RecipientRecord

__all__ = ["RecipientRecord"]
