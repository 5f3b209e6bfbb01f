from __future__ import annotations

from typing import Optional


class ApiError(Exception):
    """Base class for all errors raised by the API client."""


class ConfigError(ApiError):
    """The client configuration is missing or invalid."""


class InvalidCIDError(ApiError, ValueError):
    """A resource CID failed validation before any request was made."""


class ApiRequestError(ApiError):
    """The request could not be sent or no response was received."""


class ApiResponseError(ApiError):
    """The API answered with a non-success status code."""

    def __init__(self, status_code: int, body: str = "", path: Optional[str] = None):
        self.status_code = int(status_code)
        self.body = body
        self.path = path
        super().__init__(f"API response code {self.status_code}: {body.strip()}")


class ApiDecodeError(ApiError):
    """The response body could not be decoded into the expected shape."""
