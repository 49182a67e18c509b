"""Exception hierarchy for the Transitland client.

Every error raised by a request is either a transport failure or a
deserialization failure; both derive from TransitlandError.
"""

from typing import Any


class TransitlandError(Exception):
    """Base exception for all Transitland client errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message.
            details: Extra context (URL, status code, resource noun...).
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class TransportError(TransitlandError):
    """Network failure, TLS/connection error, timeout or non-2xx response."""

    def __init__(self, message: str, url: str, status_code: int | None = None):
        details: dict[str, Any] = {"url": url}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class DeserializationError(TransitlandError):
    """Response body does not match the expected JSON shape."""


class UnsupportedOperationError(TransitlandError):
    """Operation cannot be performed in the current context."""


class ConfigurationError(TransitlandError):
    """Client configuration is missing or invalid."""
