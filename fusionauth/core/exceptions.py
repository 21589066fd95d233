"""FusionAuth client exceptions for error handling."""
from __future__ import annotations
from typing import Optional


class FusionAuthError(Exception):
    """Base exception for all FusionAuth client operations."""
    pass


class ConfigurationError(FusionAuthError, ValueError):
    """Request could not be sent because the builder is incomplete.

    Raised before any network I/O, e.g. missing URL/host or HTTP method.
    """
    pass


class TransportError(FusionAuthError):
    """No HTTP response was obtained (DNS, connect, TLS, timeout).

    The underlying ``requests`` exception is available as ``__cause__``.

    Attributes:
        method: HTTP method of the failed request
        url: Request URL
    """

    def __init__(self, message: str, method: Optional[str] = None, url: Optional[str] = None):
        self.method = method
        self.url = url
        super().__init__(message)


class ResponseDecodeError(FusionAuthError):
    """HTTP exchange succeeded but the response body is not valid JSON.

    Attributes:
        status: HTTP status code of the response (None when decoding outside a request)
        content: Raw response body
    """

    def __init__(self, message: str, content: bytes = b"", status: Optional[int] = None):
        self.status = status
        self.content = content
        super().__init__(message)
