"""
Custom exception types for the BigChange API client.

These exceptions allow callers to distinguish between failures of the
network transport, HTTP or decoding problems reported by the web
service, and responses whose shape no longer matches the fields the
client expects.
"""

from __future__ import annotations

from typing import Optional


class BigChangeError(Exception):
    """Base exception for all BigChange client errors."""


class BigChangeTransportError(BigChangeError):
    """Raised when the request could not be sent or no response arrived."""


class BigChangeAPIError(BigChangeError):
    """Raised when the web service answered but the answer is unusable."""


class BigChangeHTTPError(BigChangeAPIError):
    """Raised when the web service returns an error status (4xx/5xx)."""

    def __init__(self, message: str, *, status_code: int, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class BigChangeDecodeError(BigChangeAPIError):
    """Raised when a successful response body is not valid JSON."""


class BigChangeSchemaError(BigChangeError):
    """Raised when an expected key is missing from a response.

    ``key`` holds the name of the first missing vendor key, so callers
    can tell a changed vendor schema apart from a programming error.
    """

    def __init__(self, key: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Response is missing expected key {key!r}")
        self.key = key
