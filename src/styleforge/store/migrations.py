from __future__ import annotations

from styleforge.store.db import Database

SCHEMA = """
CREATE TABLE IF NOT EXISTS style_presets (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    category TEXT NOT NULL DEFAULT 'custom',
    state_json TEXT NOT NULL,
    is_public INTEGER NOT NULL DEFAULT 0,
    tags TEXT NOT NULL DEFAULT '[]',
    created_at TEXT NOT NULL DEFAULT ''
);

CREATE INDEX IF NOT EXISTS idx_style_presets_created_at
    ON style_presets (created_at);
"""


def run_migrations(db: Database) -> None:
    """Create the preset tables if they do not exist."""
    with db.transaction():
        db.executescript(SCHEMA)
