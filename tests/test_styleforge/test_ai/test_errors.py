from __future__ import annotations

import pytest

from styleforge.ai.errors import (
    AuthenticationError,
    InvalidRequestError,
    ProviderError,
    QuotaExceededError,
    RateLimitError,
    ServerError,
    StylerError,
    error_from_status_code,
)


class TestErrorHierarchy:
    def test_provider_error_is_styler_error(self) -> None:
        assert isinstance(ServerError("boom"), StylerError)

    def test_cause_is_kept(self) -> None:
        cause = RuntimeError("inner")
        err = StylerError("outer", cause=cause)
        assert err.cause is cause
        assert str(err) == "outer"

    def test_retryable_defaults(self) -> None:
        assert RateLimitError("x").retryable is True
        assert ServerError("x").retryable is True
        assert AuthenticationError("x").retryable is False
        assert QuotaExceededError("x").retryable is False


class TestErrorFromStatusCode:
    @pytest.mark.parametrize(
        "status, cls",
        [
            (400, InvalidRequestError),
            (422, InvalidRequestError),
            (401, AuthenticationError),
            (403, AuthenticationError),
            (402, QuotaExceededError),
            (429, RateLimitError),
            (500, ServerError),
            (503, ServerError),
        ],
    )
    def test_mapping(self, status, cls) -> None:
        err = error_from_status_code(status, "msg", raw={"error": {}})
        assert type(err) is cls
        assert err.status_code == status
        assert err.raw == {"error": {}}

    def test_unknown_status(self) -> None:
        err = error_from_status_code(418, "teapot")
        assert type(err) is ProviderError
        assert err.retryable is False
