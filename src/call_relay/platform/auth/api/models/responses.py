"""Auth response models."""

from pydantic import Field

from .....api.schemas import CamelModel


class LoginResponse(CamelModel):
    token: str = Field(..., description="Bearer token for the legacy identity")
