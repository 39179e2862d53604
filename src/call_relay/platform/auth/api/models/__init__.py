"""Auth API models."""

from .requests import LoginRequest
from .responses import LoginResponse

__all__ = ["LoginRequest", "LoginResponse"]
