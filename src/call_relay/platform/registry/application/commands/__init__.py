"""Registry commands."""

from .register_recipient import RegisterRecipient, RegisterRecipientRequest

__all__ = ["RegisterRecipient", "RegisterRecipientRequest"]
