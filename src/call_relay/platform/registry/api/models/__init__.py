"""Registry API models."""

from .requests import RegisterRequest
from .responses import (
    RecipientSummary,
    RegisterResponse,
    RegistryListingResponse,
    RegistryStatusResponse,
)

__all__ = [
    "RegisterRequest",
    "RecipientSummary",
    "RegisterResponse",
    "RegistryListingResponse",
    "RegistryStatusResponse",
]
