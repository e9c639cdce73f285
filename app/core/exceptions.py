"""
Custom application exceptions.

Centralised exception definitions for clean error handling
across all layers of the application.
"""

from typing import Optional


class GalleryServiceError(Exception):
    """Base exception for the gallery service."""

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(GalleryServiceError):
    """Raised when required upstream configuration is missing."""

    def __init__(self, setting: str):
        self.setting = setting
        super().__init__(f"Missing required configuration: {setting}")


class UpstreamError(GalleryServiceError):
    """Raised when the Notion database query fails."""

    def __init__(
        self,
        reason: str = "Unknown error",
        status_code: Optional[int] = None,
        code: Optional[str] = None,
    ):
        self.reason = reason
        self.status_code = status_code
        self.code = code
        super().__init__(reason)


class UpstreamUnavailableError(UpstreamError):
    """
    Notion could not be reached.

    Examples: connection refused, DNS failure, request timeout.
    """
    pass


class UpstreamResponseError(UpstreamError):
    """
    Notion answered with a non-success status.

    Examples: 401 unauthorized token, 404 unknown database,
    400 invalid filter, 429 rate limited.
    """
    pass


class MalformedResponseError(UpstreamError):
    """Raised when a Notion response body cannot be interpreted."""
    pass
