"""Exception classes for weather service interactions.

This module defines a hierarchy of exception classes for the ways a single
request to the weather service can fail: the transport, the HTTP status, or
the decoding of the response body.
"""

from __future__ import annotations

from typing import Final, Optional

# Human-readable explanations for common HTTP errors
HTTP_ERROR_MAP: Final = {
    400: "Bad request - check the location",
    403: "Request refused by the weather service",
    404: "Location or endpoint not found",
    429: "Rate limit exceeded",
    500: "Weather service internal error",
    502: "Bad gateway at the weather service",
    503: "Service unavailable (maintenance)",
    504: "Gateway timeout",
}


class WeatherAPIError(Exception):
    """Error during a weather service request or response decoding.

    Every failure of a request/response cycle is raised as a subclass of
    this error so the command line can report it at a single place.
    """

    def __init__(self, code: int, message: str) -> None:
        """Initialize the exception.

        Args:
            code: HTTP status code, or 0 when no response status applies
            message: Human-readable error message
        """
        super().__init__(f"[{code}] {message}")
        self.code: int = code
        self.message: str = message


class NetworkError(WeatherAPIError):
    """Raised when a network issue prevents communication with the service."""

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


class HTTPStatusError(WeatherAPIError):
    """Raised when the service answers with a status outside 2xx."""

    def __init__(self, code: int, message: str, body: Optional[str] = None) -> None:
        """Initialize with the response status and body.

        Args:
            code: HTTP status code of the response
            message: Human-readable error message
            body: Response body text, when the response carried one
        """
        super().__init__(code, message)
        self.body: Optional[str] = body

    @property
    def is_client_error(self) -> bool:
        """Check if this is a client-side error (4xx).

        Returns:
            True for 400-499 status codes
        """
        return 400 <= self.code < 500

    @property
    def is_server_error(self) -> bool:
        """Check if this is a server-side error (5xx).

        Returns:
            True for 500-599 status codes
        """
        return self.code >= 500

    @classmethod
    def from_status(cls, status_code: int, body: Optional[str] = None) -> HTTPStatusError:
        """Create an error from a response status.

        Args:
            status_code: HTTP status code
            body: Response body text

        Returns:
            Appropriate HTTPStatusError subclass
        """
        body = body or None
        message = HTTP_ERROR_MAP.get(status_code) or (body or "").strip() or "Unexpected status"

        if 400 <= status_code < 500:
            if status_code == 404:
                return NotFoundError(status_code, message, body)
            elif status_code == 429:
                return RateLimitError(status_code, message, body)
            return ClientError(status_code, message, body)
        elif status_code >= 500:
            return ServerError(status_code, message, body)

        # 1xx / 3xx responses that were not followed
        return cls(status_code, message, body)


class NotFoundError(HTTPStatusError):
    """Raised when the requested location or endpoint doesn't exist."""

    pass


class RateLimitError(HTTPStatusError):
    """Raised when rate limits are exceeded."""

    pass


class ClientError(HTTPStatusError):
    """Raised for general 4xx client errors."""

    pass


class ServerError(HTTPStatusError):
    """Raised for 5xx server errors."""

    pass


class DecodeError(WeatherAPIError):
    """Raised when the response body is not JSON or does not match the schema."""

    def __init__(
        self,
        message: str,
        errors: Optional[list[tuple[str, str]]] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize with decoding error details.

        Args:
            message: Description of the decoding error
            errors: ``(path, reason)`` pairs, one per failing field
            original_error: The original exception that was caught
        """
        super().__init__(0, message)
        self.errors: list[tuple[str, str]] = errors or []
        self.original_error = original_error

    @property
    def paths(self) -> list[str]:
        """Dotted paths of every field that failed to decode."""
        return [path for path, _ in self.errors]


def format_cause_chain(exc: BaseException) -> str:
    """Render an exception and every exception it was raised from.

    Args:
        exc: Outermost exception

    Returns:
        One line per exception, outermost first, decode failures expanded
        to one indented line per failing path
    """
    lines: list[str] = []
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        prefix = "Error" if not lines else "Caused by"
        lines.append(f"{prefix}: {type(current).__name__}: {current}")
        if isinstance(current, DecodeError):
            lines.extend(f"  {path}: {reason}" for path, reason in current.errors)
        elif isinstance(current, HTTPStatusError) and current.body:
            lines.append(f"  body: {current.body.strip()[:200]}")
        current = current.__cause__ or current.__context__
    return "\n".join(lines)
