from __future__ import annotations

import pytest

from styleforge.ai.errors import ServerError
from styleforge.ai.styler import AIStyler, StubStylerBackend
from styleforge.engine.merge import state_from_dict
from styleforge.store.db import Database
from styleforge.store.migrations import run_migrations
from styleforge.store.repositories import Preset, PresetCategory
from styleforge.web.app import create_app

AI_RESPONSES = {
    "shadow": '{"changes": {"effects": {"shadow": "lg"}}, "message": "Added large shadow"}',
    "center": '{"changes": {"typography": {"textAlign": "center"}}, "message": "Centered text"}',
}


@pytest.fixture
def db():
    """Create a fresh in-memory database with migrations for each test."""
    database = Database(":memory:")
    database.connect()
    run_migrations(database)
    yield database
    database.close()


@pytest.fixture
def backend():
    return StubStylerBackend(responses=AI_RESPONSES)


@pytest.fixture
def app(db, backend):
    """Create a Flask app wired to a stub styling backend."""
    application = create_app(db=db, styler=AIStyler(backend))
    application.config["TESTING"] = True
    return application


@pytest.fixture
def failing_app(db):
    application = create_app(db=db, styler=AIStyler(StubStylerBackend(error=ServerError("upstream down"))))
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()


# ---------------------------------------------------------------------------
# Shared factory helpers
# ---------------------------------------------------------------------------


def make_preset(
    id: str = "pre-1",
    name: str = "Glass card",
    description: str = "Frosted panel",
    category: PresetCategory = PresetCategory.EFFECTS,
    state: dict | None = None,
    is_public: bool = False,
    tags: tuple[str, ...] = (),
    created_at: str = "2025-01-15T10:00:00Z",
) -> Preset:
    return Preset(
        id=id,
        name=name,
        description=description,
        category=category,
        state=state_from_dict(state or {"effects": {"backdropBlur": 12}}),
        is_public=is_public,
        tags=tags,
        created_at=created_at,
    )


def seed_preset(app, **kwargs) -> Preset:
    """Create a preset in the database and return it."""
    preset = make_preset(**kwargs)
    app.extensions["preset_repo"].create(preset)
    return preset
