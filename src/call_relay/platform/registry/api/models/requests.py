"""Registry request models."""

from typing import Optional

from pydantic import Field

from .....api.schemas import CamelModel


class RegisterRequest(CamelModel):
    """Device registration body.

    Fields are optional at the schema level so that missing values surface as
    domain validation errors (400) instead of schema errors.
    """

    uid: Optional[str] = Field(default=None, description="Recipient identity")
    role: Optional[str] = Field(default=None, description="Recipient role, defaults to 'user'")
    token: Optional[str] = Field(default=None, description="Device push token")
