"""Natural-language styling: prompt in, validated state patch out.

``AIStyler`` is the boundary. Backends may raise any ``StylerError``; the
styler turns every failure into an unsuccessful ``StylerResult`` so callers
never see transport exceptions.
"""
from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping, Protocol

from styleforge.ai.errors import InvalidResponseError, StylerError
from styleforge.ai._http import HttpClient
from styleforge.ai.prompts import build_system_prompt
from styleforge.model.state import StyleState
from styleforge.model.wire import normalize_patch

if TYPE_CHECKING:
    from styleforge.config import StyleforgeConfig

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Styles applied"


@dataclass(frozen=True)
class StylerResult:
    success: bool
    changes: dict[str, Any] = field(default_factory=dict, hash=False, compare=False)
    message: str = ""


class StylerBackend(Protocol):
    """Protocol for completion backends."""

    def complete(self, system_prompt: str, prompt: str) -> str:
        """Return the raw completion text, expected to be a JSON object."""
        ...


class StubStylerBackend:
    """Stub backend that returns canned responses for testing."""

    def __init__(
        self,
        responses: dict[str, str] | None = None,
        default: str = '{"changes": {}, "message": "No changes"}',
        error: StylerError | None = None,
    ) -> None:
        self._responses = responses or {}
        self._default = default
        self._error = error
        self.calls: list[str] = []

    def complete(self, system_prompt: str, prompt: str) -> str:
        self.calls.append(prompt)
        if self._error is not None:
            raise self._error
        for key, response in self._responses.items():
            if key.lower() in prompt.lower():
                return response
        return self._default

    def close(self) -> None:
        pass


class HttpStylerBackend:
    """Backend for an OpenAI-compatible ``/chat/completions`` endpoint."""

    def __init__(self, client: HttpClient, model: str) -> None:
        self._client = client
        self._model = model

    @classmethod
    def from_config(cls, config: StyleforgeConfig) -> HttpStylerBackend:
        client = HttpClient(
            base_url=config.ai_base_url,
            headers={
                "Authorization": f"Bearer {config.ai_api_key}",
                "Content-Type": "application/json",
            },
            timeout=config.ai_timeout,
        )
        return cls(client, config.ai_model)

    def complete(self, system_prompt: str, prompt: str) -> str:
        payload = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            "response_format": {"type": "json_object"},
        }
        logger.info("Styling request: model=%s", self._model)
        start = time.monotonic()
        response = self._client.post("/chat/completions", json=payload)
        logger.info("Styling response: latency=%.2fs", time.monotonic() - start)

        try:
            content = response.body["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise InvalidResponseError("No response from AI", cause=exc) from exc
        if not content:
            raise InvalidResponseError("No response from AI")
        return content

    def close(self) -> None:
        self._client.close()


def parse_completion(content: str) -> tuple[dict[str, Any], str]:
    """Parse ``{"changes": ..., "message": ...}`` into a normalized patch.

    Raises InvalidResponseError when the content is not a JSON object or
    ``changes`` is not an object.
    """
    try:
        parsed = json.loads(content)
    except json.JSONDecodeError as exc:
        raise InvalidResponseError("Invalid AI response format", cause=exc) from exc
    if not isinstance(parsed, dict):
        raise InvalidResponseError("Invalid AI response format")
    changes = parsed.get("changes") or {}
    if not isinstance(changes, Mapping):
        raise InvalidResponseError("AI response 'changes' is not an object")
    message = parsed.get("message") or DEFAULT_MESSAGE
    return normalize_patch(changes), str(message)


class AIStyler:
    """Turns a natural-language request into a patch for the current state."""

    def __init__(self, backend: StylerBackend) -> None:
        self._backend = backend

    def apply_prompt(self, prompt: str, current_state: StyleState | Mapping[str, Any]) -> StylerResult:
        if not prompt or not prompt.strip():
            return StylerResult(success=False, message="Prompt is required")

        system_prompt = build_system_prompt(current_state)
        try:
            content = self._backend.complete(system_prompt, prompt.strip())
            changes, message = parse_completion(content)
        except StylerError as exc:
            logger.warning("Styling request failed: %s", exc)
            return StylerResult(success=False, message=str(exc))
        return StylerResult(success=True, changes=changes, message=message)
