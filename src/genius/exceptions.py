"""Exception classes for Genius API client."""

from typing import Optional


class GeniusError(Exception):
    """Base exception for all Genius client errors.

    Attributes:
        message: Error message
        status: Upstream status code, if any
    """

    def __init__(self, message: str, status: Optional[int] = None):
        self.message = message
        self.status = status
        super().__init__(message)


class GeniusAuthenticationError(GeniusError):
    """No access token configured.

    Raised before any network call is made.
    """

    pass


class GeniusAPIError(GeniusError):
    """Genius API reported a failure.

    Raised when the HTTP status is not successful or when the body's
    ``meta.status`` is 400 or above (Genius returns 200 with an error body).
    """

    def __init__(self, status: int, message: str):
        """Initialize API error.

        Args:
            status: Status code, from ``meta.status`` when present
            message: Message, from ``meta.message`` when present
        """
        super().__init__(message, status)

    def __str__(self) -> str:
        return f"Error calling Genius API [{self.status}]: {self.message}"


class GeniusNotFoundError(GeniusError):
    """Requested song or artist is missing from an otherwise successful response."""

    pass


class LyricsFetchError(GeniusError):
    """Song page could not be fetched for scraping.

    Attributes:
        reason: HTTP reason phrase
    """

    def __init__(self, status: int, reason: str):
        self.reason = reason
        super().__init__(f"Failed to fetch URL: {status} {reason}", status)
