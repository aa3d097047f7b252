"""
Data-layer exceptions and the error kinds widgets switch on.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    TIMEOUT = "timeout"
    REQUEST_FAILED = "request_failed"
    INVALID_RESPONSE_FORMAT = "invalid_response_format"
    NO_DATA = "no_data"
    QUERY_FAILED = "query_failed"


class DashboardDataError(Exception):
    """Base exception for API and table read failures."""

    kind: ErrorKind = ErrorKind.REQUEST_FAILED


class ApiTimeoutError(DashboardDataError):
    """Raised when an API request does not complete within the timeout."""

    kind = ErrorKind.TIMEOUT

    def __init__(self, endpoint: str, timeout_seconds: float) -> None:
        self.endpoint = endpoint
        self.timeout_seconds = timeout_seconds
        super().__init__(f"Request to {endpoint} timed out after {timeout_seconds:g}s")


class RequestFailedError(DashboardDataError):
    """Raised for non-2xx responses and for connections that never got a response."""

    kind = ErrorKind.REQUEST_FAILED

    def __init__(self, status: Optional[int], status_text: str) -> None:
        self.status = status
        self.status_text = status_text
        if status is None:
            super().__init__(f"API error: {status_text}")
        else:
            super().__init__(f"API error: {status} {status_text}".rstrip())


class InvalidResponseFormatError(DashboardDataError):
    """Raised when a body is not JSON or not a JSON object."""

    kind = ErrorKind.INVALID_RESPONSE_FORMAT

    def __init__(self, message: str = "Invalid response format") -> None:
        super().__init__(message)


class NoDataError(DashboardDataError):
    """Raised when a source returned nothing to display."""

    kind = ErrorKind.NO_DATA


class QueryFailedError(DashboardDataError):
    """Raised when a table read fails at the backend."""

    kind = ErrorKind.QUERY_FAILED

    def __init__(self, table: str, cause: BaseException) -> None:
        self.table = table
        self.cause = cause
        super().__init__(f"Query on {table} failed: {type(cause).__name__}: {cause}")
