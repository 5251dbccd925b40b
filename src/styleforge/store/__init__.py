from __future__ import annotations

from styleforge.store.db import Database
from styleforge.store.migrations import run_migrations
from styleforge.store.repositories import (
    Preset,
    PresetCategory,
    PresetRepository,
    PresetStoreError,
    new_preset,
    preset_to_dict,
)

__all__ = [
    "Database",
    "run_migrations",
    "Preset",
    "PresetCategory",
    "PresetRepository",
    "PresetStoreError",
    "new_preset",
    "preset_to_dict",
]
