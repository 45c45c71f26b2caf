"""Custom exceptions for the Fortnite API client.

This module defines the exception hierarchy raised by every endpoint call.
Errors from httpx and pydantic never escape the public surface directly; they
are wrapped in one of the classes below and chained as ``__cause__``.
"""


class FortniteAPIClientError(Exception):
    """Base exception for Fortnite API client errors."""

    pass


class FortniteTransportError(FortniteAPIClientError):
    """Raised when the request fails at the network layer.

    Covers connection refused, DNS resolution, TLS and timeout failures.
    """

    pass


class FortniteInvalidURLError(FortniteAPIClientError):
    """Raised when a base URL or an interpolated path cannot be parsed."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class FortniteDecodeError(FortniteAPIClientError):
    """Raised when a response body cannot be decoded into the expected payload.

    Attributes:
        path: Request path of the endpoint that produced the body.
        status_code: HTTP status code of the raw response.
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.status_code = status_code


class FortniteInvalidHeaderError(FortniteAPIClientError):
    """Raised for a malformed header when strict header validation is enabled."""

    def __init__(self, message: str, header_name: str | None = None):
        super().__init__(message)
        self.header_name = header_name


class FortniteAPIStatusError(FortniteAPIClientError):
    """Raised when strict envelope checking is enabled and the API reports failure."""

    def __init__(self, message: str, status: int, error: str | None = None):
        super().__init__(message)
        self.status = status
        self.error = error


class FortniteClientNotConnectedError(FortniteAPIClientError):
    """Raised when an endpoint is called before a transport is available."""

    pass
