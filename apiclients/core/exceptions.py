"""Exceptions raised by the API clients."""
from __future__ import annotations

from typing import Optional


class ApiClientError(Exception):
    """Base exception for all API client operations."""
    pass


class TransportError(ApiClientError):
    """Connection, DNS, TLS or timeout failure before a response arrived."""
    pass


class HttpStatusError(ApiClientError):
    """Non-2xx response from the remote API.

    Attributes:
        status_code: HTTP status code
        body: Raw response body, kept for diagnostics
        url: URL that failed
    """

    def __init__(self, status_code: int, body: str, url: str):
        self.status_code = status_code
        self.body = body
        self.url = url
        super().__init__(f"[{status_code}] {url}: {body}")


class DecodeError(ApiClientError):
    """Response body does not match the expected type."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        if url:
            message = f"{url}: {message}"
        super().__init__(message)


class EncodeError(ApiClientError):
    """Request body could not be serialized."""
    pass


class ConfigurationError(ApiClientError):
    """Required client setting is missing or invalid."""
    pass
