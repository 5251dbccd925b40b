"""Errors raised while talking to the natural-language styling service.

``AIStyler`` catches ``StylerError`` and reports it as a failed result;
backends and the HTTP client raise the concrete subclasses.
"""
from __future__ import annotations

from typing import Any


class StylerError(Exception):
    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ProviderError(StylerError):
    """The completion endpoint answered with a non-2xx status."""

    retryable_by_default = False

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        retryable: bool | None = None,
        raw: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.retryable = self.retryable_by_default if retryable is None else retryable
        self.raw = raw


class AuthenticationError(ProviderError):
    """Missing or rejected API key."""


class InvalidRequestError(ProviderError):
    pass


class QuotaExceededError(ProviderError):
    """Payment required: the account is out of credits."""


class RateLimitError(ProviderError):
    retryable_by_default = True


class ServerError(ProviderError):
    retryable_by_default = True


class RequestTimeoutError(StylerError):
    pass


class NetworkError(StylerError):
    """The endpoint could not be reached."""


class InvalidResponseError(StylerError):
    """The completion did not contain a usable JSON object."""


_STATUS_ERRORS: dict[int, type[ProviderError]] = {
    400: InvalidRequestError,
    401: AuthenticationError,
    402: QuotaExceededError,
    403: AuthenticationError,
    422: InvalidRequestError,
    429: RateLimitError,
}


def error_from_status_code(
    status_code: int,
    message: str,
    *,
    raw: dict[str, Any] | None = None,
) -> ProviderError:
    """Pick the error type for an HTTP status; unknown statuses are not retried."""
    error_cls = _STATUS_ERRORS.get(status_code)
    if error_cls is None:
        error_cls = ServerError if 500 <= status_code <= 599 else ProviderError
    return error_cls(message, status_code=status_code, raw=raw)
