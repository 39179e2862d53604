"""Recipient registry platform module.

Stores one push destination per recipient identity, together with its role,
for later dispatch.
"""

from .core.entities import RecipientRecord
from .core.protocols import RecipientStore

__all__ = ["RecipientRecord", "RecipientStore"]
