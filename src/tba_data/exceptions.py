"""
Exception types raised by the TBA data client.

Validation problems fail fast before any request is issued; upstream problems
carry the HTTP status or the underlying cause.
"""

from typing import Optional


class TBADataError(Exception):
    """Base class for all errors raised by tba_data."""


class InvalidArgument(TBADataError, ValueError):
    """A year, team key or event key was malformed."""


class InvalidRequestKind(InvalidArgument):
    """A request kind outside the supported set was asked for."""


class ConfigurationError(TBADataError):
    """A required configuration field is missing or unreadable."""


class UpstreamError(TBADataError):
    """The API returned a bad status, an empty body or malformed JSON, or the request failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
