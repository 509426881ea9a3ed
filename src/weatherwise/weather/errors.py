"""Exception classes for weather provider interactions.

Every failure a query can end in maps to one ``ErrorCategory`` so callers
can pick a message or decide whether re-triggering the query makes sense.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional

from weatherwise.common.enums import ErrorCategory


class WeatherAPIError(Exception):
    """Error during a WeatherAPI.com request or response parsing.

    Raised when the request fails due to network issues, invalid API key,
    rate limiting, missing locations, or malformed response data.
    """

    category: ClassVar[ErrorCategory] = ErrorCategory.PROVIDER

    def __init__(
        self, code: int, message: str, response: Optional[Dict[str, Any]] = None
    ) -> None:
        """Initialize the exception.

        Args:
            code: HTTP status code or custom error code
            message: Human-readable error message
            response: Optional raw API response for debugging
        """
        super().__init__(f"[{code}] {message}")
        self.code: int = code
        self.message: str = message
        self.response: Optional[Dict[str, Any]] = response

    @classmethod
    def from_response(
        cls, response: Dict[str, Any], status_code: int = 0
    ) -> WeatherAPIError:
        """Create an error from a non-2xx API response.

        WeatherAPI.com wraps failures as ``{"error": {"code": .., "message": ..}}``.

        Args:
            response: API response dictionary
            status_code: HTTP status code

        Returns:
            Appropriate WeatherAPIError subclass
        """
        body = response.get("error", response)
        message = body.get("message") if isinstance(body, dict) else None

        if status_code in (401, 403):
            return AuthenticationError(
                status_code, message or "Invalid WeatherAPI key", response
            )
        if status_code == 429:
            return RateLimitError(
                status_code, message or "WeatherAPI rate limit exceeded", response
            )
        return ProviderError(status_code, message or "Provider error", response)


class ProviderError(WeatherAPIError):
    """Raised for any non-2xx provider answer without a dedicated class."""

    pass


class LocationNotFound(WeatherAPIError):
    """Raised when geocoding returns zero matches."""

    category = ErrorCategory.LOCATION_NOT_FOUND

    def __init__(self, query: str) -> None:
        super().__init__(404, f"Location not found: {query!r}")
        self.query = query


class AuthenticationError(WeatherAPIError):
    """Raised when the provider rejects the API key (401/403)."""

    category = ErrorCategory.AUTH


class RateLimitError(WeatherAPIError):
    """Raised when rate limits are exceeded (429)."""

    category = ErrorCategory.RATE_LIMITED


class NetworkError(WeatherAPIError):
    """Raised when a network issue prevents API communication."""

    category = ErrorCategory.NETWORK

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize with network error details.

        Args:
            message: Description of the network error
            original_error: The original exception that was caught
        """
        super().__init__(0, message)
        self.original_error = original_error


class ParseError(ProviderError):
    """Raised when a provider response does not match the expected shape."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        super().__init__(0, message)
        self.original_error = original_error


class InvalidInput(ValueError):
    """Raised when a pure component receives input it cannot work with."""

    category: ClassVar[ErrorCategory] = ErrorCategory.INVALID_INPUT


class QuerySuperseded(Exception):
    """Raised when a newer query has replaced the one in flight."""

    def __init__(self, token: int, latest: int) -> None:
        super().__init__(f"Query {token} superseded by {latest}")
        self.token = token
        self.latest = latest
