"""Domain exceptions for the call relay."""

from typing import Optional

from .base import RelayError


# Configuration Errors
class ConfigurationError(RelayError):
    """Raised when there's a configuration issue."""
    pass


# Validation Errors
class ValidationError(RelayError):
    """Raised when input validation fails."""
    pass


class RequiredFieldError(ValidationError):
    """Raised when a required field is missing or empty."""

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(
            message or f"missing {field}",
            details={"field": field},
        )
        self.field = field


# Dispatch Errors
class NoRecipientsError(RelayError):
    """Raised when a dispatch resolves to an empty destination set."""

    def __init__(self, role: Optional[str] = None):
        if role:
            message = f"No registered recipients with role '{role}'"
        else:
            message = "No registered recipients"
        super().__init__(message, details={"role": role} if role else {})
        self.role = role


# Authentication Errors
class AuthenticationError(RelayError):
    """Base class for authentication errors."""
    pass


class InvalidCredentialsError(AuthenticationError):
    """Raised when provided credentials are invalid."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class RateLimitExceededError(RelayError):
    """Raised when a client exceeds its request quota."""

    def __init__(self, retry_after: int, message: Optional[str] = None):
        super().__init__(
            message or f"Too many requests. Retry in {retry_after} seconds",
            details={"retry_after": retry_after},
        )
        self.retry_after = retry_after


# External Collaborator Errors
class ExternalServiceError(RelayError):
    """Raised when an external collaborator call fails."""
    pass


class TransportFailureError(ExternalServiceError):
    """Raised when the push transport fails to deliver a request."""
    pass


class IdentityProviderError(ExternalServiceError):
    """Raised when the identity provider cannot issue a token."""
    pass
