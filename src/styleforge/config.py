from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class StyleforgeConfig:
    db_path: str = "styleforge.db"
    host: str = "127.0.0.1"
    port: int = 5000
    ai_base_url: str = "https://api.openai.com/v1"
    ai_model: str = "gpt-4o-mini"
    ai_api_key: str = ""
    ai_timeout: float = 30.0
    placeholder_selector: str = ".element"

    @classmethod
    def from_env(cls) -> StyleforgeConfig:
        """Load configuration from ``STYLEFORGE_*`` environment variables."""
        defaults = cls()
        return cls(
            db_path=os.environ.get("STYLEFORGE_DB_PATH", defaults.db_path),
            host=os.environ.get("STYLEFORGE_HOST", defaults.host),
            port=int(os.environ.get("STYLEFORGE_PORT", defaults.port)),
            ai_base_url=os.environ.get("STYLEFORGE_AI_BASE_URL", defaults.ai_base_url),
            ai_model=os.environ.get("STYLEFORGE_AI_MODEL", defaults.ai_model),
            ai_api_key=os.environ.get("STYLEFORGE_AI_API_KEY", defaults.ai_api_key),
            ai_timeout=float(os.environ.get("STYLEFORGE_AI_TIMEOUT", defaults.ai_timeout)),
            placeholder_selector=os.environ.get(
                "STYLEFORGE_PLACEHOLDER_SELECTOR", defaults.placeholder_selector
            ),
        )
