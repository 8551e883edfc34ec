"""Custom exceptions for the viewport cache engine."""

from typing import Any


class ViewcacheError(Exception):
    """Base exception for all viewcache errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize viewcache error.

        Args:
            message: Error message
            details: Additional error details

        """
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(ViewcacheError):
    """Raised when configuration is invalid or missing."""


class InvalidPaginationError(ViewcacheError):
    """Raised when a navigation call is made in a state that does not allow it."""

    def __init__(self, message: str, page: int | None = None) -> None:
        super().__init__(message, {"page": page})
        self.page = page


class MissingIdentityError(ViewcacheError):
    """Raised when a record carries no identity attribute."""

    def __init__(self, record: dict[str, Any]) -> None:
        super().__init__(f"Record identity was not found for record: {record!r}", {"record": record})
        self.record = record


class RecordNotFoundError(ViewcacheError):
    """Raised when a record expected in the cache is not there."""

    def __init__(self, record: dict[str, Any]) -> None:
        super().__init__(f"Record is not cached: {record!r}", {"record": record})
        self.record = record


class APIError(ViewcacheError):
    """Base class for API-related errors."""

    def __init__(
        self,
        status_code: int,
        message: str,
        response_text: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize API error.

        Args:
            status_code: HTTP status code
            message: Error message
            response_text: Raw response text from API
            details: Additional error details

        """
        super().__init__(message, details)
        self.status_code = status_code
        self.response_text = response_text


class AuthenticationError(APIError):
    """Raised when authentication fails (401)."""

    def __init__(self, message: str = "Authentication failed", response_text: str | None = None) -> None:
        super().__init__(401, message, response_text)


class NotFoundError(APIError):
    """Raised when resource is not found (404)."""

    def __init__(self, message: str = "Resource not found", response_text: str | None = None) -> None:
        super().__init__(404, message, response_text)


class RateLimitError(APIError):
    """Raised when rate limit is exceeded (429)."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        response_text: str | None = None,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(429, message, response_text)
        self.retry_after = retry_after


class TimeoutError(ViewcacheError):
    """Raised when operation times out."""

    def __init__(self, operation: str, timeout_seconds: float) -> None:
        message = f"Operation '{operation}' timed out after {timeout_seconds} seconds"
        super().__init__(message, {"operation": operation, "timeout_seconds": timeout_seconds})
        self.operation = operation
        self.timeout_seconds = timeout_seconds


class CacheError(ViewcacheError):
    """Raised when cache operations fail."""
