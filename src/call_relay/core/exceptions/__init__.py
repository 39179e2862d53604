"""Exception hierarchy for the call relay."""

from .base import RelayError, create_error_response, get_http_status_code
from .domain import (
    AuthenticationError,
    ConfigurationError,
    ExternalServiceError,
    IdentityProviderError,
    InvalidCredentialsError,
    NoRecipientsError,
    RateLimitExceededError,
    RequiredFieldError,
    TransportFailureError,
    ValidationError,
)
from .http_mapping import HTTP_STATUS_MAP

__all__ = [
    "RelayError",
    "create_error_response",
    "get_http_status_code",
    "HTTP_STATUS_MAP",
    "AuthenticationError",
    "ConfigurationError",
    "ExternalServiceError",
    "IdentityProviderError",
    "InvalidCredentialsError",
    "NoRecipientsError",
    "RateLimitExceededError",
    "RequiredFieldError",
    "TransportFailureError",
    "ValidationError",
]
