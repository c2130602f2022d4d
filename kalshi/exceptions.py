"""
Custom exceptions for Kalshi client.

Provides typed exceptions so callers can tell a failed request apart
from a malformed response.
"""

from typing import Optional, Any


class KalshiError(Exception):
    """Base exception for all Kalshi errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransportError(KalshiError):
    """HTTP request failed (connection, timeout or non-success status)."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 response: Optional[Any] = None):
        super().__init__(message, {"status_code": status_code, "response": response})
        self.status_code = status_code
        self.response = response


class DeserializationError(KalshiError):
    """Response body does not match the expected shape."""

    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(message, {"body": body})
        self.body = body


class SessionStateError(KalshiError):
    """Operation called on a handle in the wrong authentication state."""
    pass
