"""httpx transport for the styling service."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from styleforge.ai.errors import NetworkError, RequestTimeoutError, error_from_status_code


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: dict[str, Any]
    raw_text: str = ""


def _json_object(resp: httpx.Response) -> dict[str, Any]:
    """The response body if it is a JSON object, else ``{}``."""
    try:
        body = resp.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _error_message(resp: httpx.Response, body: dict[str, Any]) -> str:
    # OpenAI-style {"error": {"message": ...}}, else the raw text.
    error = body.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return resp.text or f"HTTP {resp.status_code}"


class HttpClient:
    """JSON-over-HTTP client; transport failures and non-2xx replies raise
    ``StylerError`` subclasses."""

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str],
        timeout: float = 30.0,
        connect_timeout: float = 5.0,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=httpx.Timeout(timeout, connect=connect_timeout),
        )

    def post(self, path: str, json: dict[str, Any]) -> HttpResponse:
        try:
            resp = self._client.post(path, json=json)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(str(exc), cause=exc) from exc
        except httpx.TransportError as exc:
            raise NetworkError(str(exc), cause=exc) from exc

        body = _json_object(resp)
        if not resp.is_success:
            raise error_from_status_code(resp.status_code, _error_message(resp, body), raw=body)
        return HttpResponse(status_code=resp.status_code, body=body, raw_text=resp.text)

    def close(self) -> None:
        self._client.close()
