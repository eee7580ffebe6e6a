"""Result type returned by every external integration call."""

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import requests

logger = logging.getLogger(__name__)


class ErrorKind(StrEnum):
    """Classification of a failed integration call."""

    NETWORK = "network"
    AUTH = "auth"
    RATE_LIMITED = "rate_limited"
    INVALID_REQUEST = "invalid_request"
    NOT_FOUND = "not_found"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Result:
    """Outcome of a call to the record store, the marketing list or the mailer."""

    ok: bool
    value: Any = None
    error: ErrorKind | None = None
    message: str = ""

    @classmethod
    def success(cls, value=None, message=""):
        """Build a successful result."""
        return cls(ok=True, value=value, message=message)

    @classmethod
    def failure(cls, error: ErrorKind, message=""):
        """Build a failed result."""
        return cls(ok=False, error=error, message=message)

    def __bool__(self):
        """Truthy when the call succeeded."""
        return self.ok


def error_kind_for_status(status_code: int) -> ErrorKind:
    """Map an HTTP status code returned by a vendor API to an error kind."""
    if status_code in (401, 403):
        return ErrorKind.AUTH
    if status_code == 404:  # noqa: PLR2004
        return ErrorKind.NOT_FOUND
    if status_code == 429:  # noqa: PLR2004
        return ErrorKind.RATE_LIMITED
    if 400 <= status_code < 500:  # noqa: PLR2004
        return ErrorKind.INVALID_REQUEST
    return ErrorKind.UNKNOWN


def error_kind_for_exception(error: Exception) -> ErrorKind:
    """Map a `requests` exception to an error kind."""
    if isinstance(error, requests.HTTPError) and error.response is not None:
        return error_kind_for_status(error.response.status_code)
    if isinstance(error, (requests.ConnectionError, requests.Timeout)):
        return ErrorKind.NETWORK
    return ErrorKind.UNKNOWN


def call_integration(label, func, *args, **kwargs) -> Result:
    """
    Run one downstream integration call without letting it break the request.

    Failed results are logged, unexpected exceptions are logged with their traceback
    and turned into an `ErrorKind.UNKNOWN` failure. Calls returning something else
    than a `Result` (e.g. `send_mail`) are wrapped in a successful one.
    """
    try:
        result = func(*args, **kwargs)
    except Exception as err:  # noqa: BLE001
        logger.exception("%s failed: %s", label, err)
        return Result.failure(ErrorKind.UNKNOWN, str(err))

    if not isinstance(result, Result):
        return Result.success(result)

    if not result.ok:
        logger.error("%s failed (%s): %s", label, result.error, result.message)
    return result
