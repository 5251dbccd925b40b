from __future__ import annotations

from styleforge.ai.errors import (
    AuthenticationError,
    InvalidRequestError,
    InvalidResponseError,
    NetworkError,
    ProviderError,
    QuotaExceededError,
    RateLimitError,
    RequestTimeoutError,
    ServerError,
    StylerError,
    error_from_status_code,
)
from styleforge.ai._http import HttpClient, HttpResponse
from styleforge.ai.prompts import build_system_prompt
from styleforge.ai.styler import (
    AIStyler,
    HttpStylerBackend,
    StubStylerBackend,
    StylerBackend,
    StylerResult,
    parse_completion,
)

__all__ = [
    # errors
    "StylerError",
    "ProviderError",
    "AuthenticationError",
    "InvalidRequestError",
    "QuotaExceededError",
    "RateLimitError",
    "ServerError",
    "RequestTimeoutError",
    "NetworkError",
    "InvalidResponseError",
    "error_from_status_code",
    # transport
    "HttpClient",
    "HttpResponse",
    # styler
    "build_system_prompt",
    "StylerBackend",
    "HttpStylerBackend",
    "StubStylerBackend",
    "StylerResult",
    "AIStyler",
    "parse_completion",
]
