"""Auth request models."""

from typing import Optional

from pydantic import Field

from .....api.schemas import CamelModel


class LoginRequest(CamelModel):
    username: Optional[str] = Field(default=None, description="Legacy account username")
    password: Optional[str] = Field(default=None, description="Legacy account secret")
