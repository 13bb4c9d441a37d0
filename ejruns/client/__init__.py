"""Client module for ejudge master API interaction."""

from .client import EjudgeClient
from .exceptions import (
    ApiResponseError,
    ConfigurationError,
    ContestIdError,
    DecodeError,
    EjrunsError,
    HTTPStatusError,
    TransportError,
)
from .models import ApiError, Contest, ReportRow, Run, RunPage

__all__ = [
    "EjudgeClient",
    "ApiError",
    "Contest",
    "ReportRow",
    "Run",
    "RunPage",
    "EjrunsError",
    "ConfigurationError",
    "TransportError",
    "HTTPStatusError",
    "DecodeError",
    "ApiResponseError",
    "ContestIdError",
]
