"""HTTP status code mapping for relay exceptions."""

from typing import Dict, Type

from .base import RelayError
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


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    ValidationError: 400,
    RequiredFieldError: 400,

    # 401 Unauthorized
    AuthenticationError: 401,
    InvalidCredentialsError: 401,

    # 404 Not Found
    NoRecipientsError: 404,

    # 429 Too Many Requests
    RateLimitExceededError: 429,

    # 500 Internal Server Error
    ConfigurationError: 500,
    ExternalServiceError: 500,
    TransportFailureError: 500,
    IdentityProviderError: 500,

    # Default for RelayError
    RelayError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Resolve the HTTP status for an exception, walking its class hierarchy."""
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
    return 500
