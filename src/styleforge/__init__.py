"""Styleforge: visual style editing core."""
from __future__ import annotations

from styleforge.config import StyleforgeConfig
from styleforge.engine.session import EditingSession
from styleforge.model.state import DEFAULT_STATE, StyleState

__all__ = [
    "DEFAULT_STATE",
    "EditingSession",
    "StyleState",
    "StyleforgeConfig",
]
