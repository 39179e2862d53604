"""Base exceptions for the call relay.

All relay exceptions inherit from RelayError and carry an error code,
structured details and an HTTP status code mapping for API responses.
"""

from typing import Any, Dict, Optional


class RelayError(Exception):
    """Base exception for all relay errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception."""
    from .http_mapping import get_http_status_code as get_mapped_status_code
    return get_mapped_status_code(exception)


def create_error_response(exception: RelayError) -> Dict[str, Any]:
    """Create standardized error response body from exception."""
    return {
        "ok": False,
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
        },
    }
