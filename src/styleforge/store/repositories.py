from __future__ import annotations

import json
import logging
import sqlite3
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum

from styleforge.engine.merge import state_from_dict
from styleforge.model.state import DEFAULT_STATE, StyleState
from styleforge.model.wire import state_to_dict
from styleforge.store.db import Database

logger = logging.getLogger(__name__)

_INSERT_PRESET = """
INSERT INTO style_presets
    (id, name, description, category, state_json, is_public, tags, created_at)
VALUES (?, ?, ?, ?, ?, ?, ?, ?)
"""


class PresetStoreError(Exception):
    """A preset could not be read from or written to the database."""


class PresetCategory(StrEnum):
    CUSTOM = "custom"
    TYPOGRAPHY = "typography"
    LAYOUT = "layout"
    EFFECTS = "effects"
    COLORS = "colors"


@dataclass(frozen=True)
class Preset:
    id: str
    name: str
    state: StyleState = DEFAULT_STATE
    description: str = ""
    category: PresetCategory = PresetCategory.CUSTOM
    is_public: bool = False
    tags: tuple[str, ...] = ()
    created_at: str = ""  # ISO 8601


def new_preset(
    name: str,
    state: StyleState,
    description: str = "",
    category: PresetCategory | str = PresetCategory.CUSTOM,
    is_public: bool = False,
    tags: tuple[str, ...] = (),
) -> Preset:
    """Build a preset with a fresh id and creation timestamp."""
    return Preset(
        id=uuid.uuid4().hex[:12],
        name=name,
        state=state,
        description=description,
        category=PresetCategory(category),
        is_public=is_public,
        tags=tuple(tags),
        created_at=datetime.now(timezone.utc).isoformat(),
    )


def preset_to_dict(preset: Preset) -> dict:
    return {
        "id": preset.id,
        "name": preset.name,
        "description": preset.description,
        "category": str(preset.category),
        "state": state_to_dict(preset.state),
        "isPublic": preset.is_public,
        "tags": list(preset.tags),
        "createdAt": preset.created_at,
    }


class PresetRepository:
    """Repository for saved style presets.

    ``sqlite3`` failures are re-raised as PresetStoreError.
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    def create(self, preset: Preset) -> str:
        """Insert a preset and return its id."""
        try:
            with self._db.transaction() as conn:
                conn.execute(_INSERT_PRESET, _preset_to_row(preset))
        except sqlite3.Error as exc:
            logger.error("Failed to save preset %s: %s", preset.name, exc)
            raise PresetStoreError(f"could not save preset {preset.name!r}") from exc
        logger.info("Saved preset %s (%s)", preset.id, preset.name)
        return preset.id

    def get(self, preset_id: str) -> Preset | None:
        """Retrieve a preset by ID, or None if not found."""
        try:
            row = self._db.fetch_one("SELECT * FROM style_presets WHERE id = ?", (preset_id,))
        except sqlite3.Error as exc:
            raise PresetStoreError(f"could not load preset {preset_id!r}") from exc
        if row is None:
            return None
        return _row_to_preset(row)

    def list_all(self, query: str = "") -> tuple[Preset, ...]:
        """Newest first, optionally filtered by a case-insensitive name match."""
        try:
            if query:
                rows = self._db.fetch_all(
                    "SELECT * FROM style_presets WHERE instr(lower(name), ?) > 0 "
                    "ORDER BY created_at DESC",
                    (query.lower(),),
                )
            else:
                rows = self._db.fetch_all("SELECT * FROM style_presets ORDER BY created_at DESC")
        except sqlite3.Error as exc:
            raise PresetStoreError("could not list presets") from exc
        return tuple(_row_to_preset(r) for r in rows)

    def delete(self, preset_id: str) -> bool:
        """Delete a preset; returns False when it did not exist."""
        try:
            with self._db.transaction() as conn:
                cursor = conn.execute("DELETE FROM style_presets WHERE id = ?", (preset_id,))
        except sqlite3.Error as exc:
            raise PresetStoreError(f"could not delete preset {preset_id!r}") from exc
        deleted = cursor.rowcount > 0
        if deleted:
            logger.info("Deleted preset %s", preset_id)
        return deleted

    def count(self) -> int:
        row = self._db.fetch_one("SELECT COUNT(*) as cnt FROM style_presets")
        assert row is not None
        return row["cnt"]


def _preset_to_row(preset: Preset) -> tuple:
    return (
        preset.id,
        preset.name,
        preset.description,
        preset.category.value,
        json.dumps(state_to_dict(preset.state)),
        int(preset.is_public),
        json.dumps(list(preset.tags)),
        preset.created_at,
    )


def _row_to_preset(row: dict) -> Preset:
    return Preset(
        id=row["id"],
        name=row["name"],
        state=state_from_dict(json.loads(row["state_json"])),
        description=row["description"],
        category=PresetCategory(row["category"]),
        is_public=bool(row["is_public"]),
        tags=tuple(json.loads(row["tags"])),
        created_at=row["created_at"],
    )
