from __future__ import annotations

from styleforge.web.app import create_app

__all__ = ["create_app"]
