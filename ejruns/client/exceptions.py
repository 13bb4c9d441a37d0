"""Errors raised while talking to the ejudge master API."""

from typing import Optional

from .models import ApiError


class EjrunsError(Exception):
    """Base ejruns error."""


class ConfigurationError(EjrunsError):
    """Raised when the client is missing required settings."""


class TransportError(EjrunsError):
    """Raised when the request could not be performed at all."""


class HTTPStatusError(EjrunsError):
    """Raised when the server answers with a status other than 200."""

    def __init__(self, status_code: int):
        super().__init__(f"unexpected status {status_code}")
        self.status_code = status_code


class DecodeError(EjrunsError):
    """Raised when a response body is not the JSON we expect."""


class ApiResponseError(EjrunsError):
    """Raised when the API reports ok=false or returns no result."""

    def __init__(self, message: str, api_error: Optional[ApiError] = None):
        super().__init__(message)
        self.api_error = api_error


class ContestIdError(EjrunsError):
    """Raised when contest IDs cannot be read from the given sources."""
