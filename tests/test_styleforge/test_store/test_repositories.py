from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from styleforge.engine.merge import state_from_dict
from styleforge.model import DEFAULT_STATE, FontWeight
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


@pytest.fixture
def db() -> Database:
    """Create a fresh in-memory database with migrations for each test."""
    database = Database(":memory:")
    database.connect()
    run_migrations(database)
    yield database
    database.close()


@pytest.fixture
def repo(db) -> PresetRepository:
    return PresetRepository(db)


def _make_preset(
    id: str = "pre-1",
    name: str = "Bold heading",
    created_at: str = "2025-01-15T10:00:00Z",
    **kwargs,
) -> Preset:
    kwargs.setdefault("state", state_from_dict({"tag": "h1", "typography": {"fontWeight": "bold"}}))
    return Preset(id=id, name=name, created_at=created_at, **kwargs)


# ---------------------------------------------------------------------------
# migrations / db
# ---------------------------------------------------------------------------


class TestMigrations:
    def test_creates_presets_table(self, db) -> None:
        row = db.fetch_one("SELECT name FROM sqlite_master WHERE type='table' AND name='style_presets'")
        assert row is not None

    def test_idempotent(self, db) -> None:
        run_migrations(db)
        run_migrations(db)

    def test_unconnected_database(self) -> None:
        with pytest.raises(AssertionError):
            Database(":memory:").execute("SELECT 1")

    def test_transaction_rolls_back_on_error(self, db) -> None:
        with pytest.raises(RuntimeError):
            with db.transaction() as conn:
                conn.execute("INSERT INTO style_presets (id, name, state_json) VALUES ('x', 'n', '{}')")
                raise RuntimeError("boom")
        assert db.fetch_one("SELECT id FROM style_presets") is None


# ---------------------------------------------------------------------------
# PresetRepository
# ---------------------------------------------------------------------------


class TestPresetRepository:
    def test_create_and_get(self, repo) -> None:
        preset = _make_preset(
            description="Large bold title",
            category=PresetCategory.TYPOGRAPHY,
            is_public=True,
            tags=("heading", "bold"),
        )
        assert repo.create(preset) == "pre-1"
        loaded = repo.get("pre-1")
        assert loaded == preset
        assert loaded.state.typography.font_weight is FontWeight.BOLD

    def test_get_missing(self, repo) -> None:
        assert repo.get("nope") is None

    def test_state_round_trips(self, repo) -> None:
        state = state_from_dict({
            "tailwindClasses": ["flex", "gap-2"],
            "border": {"radius": {"tl": 4}, "color": "#000"},
            "transforms3D": {"perspective": 3},
        })
        repo.create(_make_preset(state=state))
        assert repo.get("pre-1").state == state

    def test_list_newest_first(self, repo) -> None:
        repo.create(_make_preset(id="a", name="Old", created_at="2025-01-01T00:00:00Z"))
        repo.create(_make_preset(id="b", name="New", created_at="2025-02-01T00:00:00Z"))
        assert [p.id for p in repo.list_all()] == ["b", "a"]

    def test_list_filters_by_name(self, repo) -> None:
        repo.create(_make_preset(id="a", name="Glass Card"))
        repo.create(_make_preset(id="b", name="Neon text"))
        assert [p.id for p in repo.list_all("glass")] == ["a"]
        assert repo.list_all("missing") == ()

    def test_delete(self, repo) -> None:
        repo.create(_make_preset())
        assert repo.delete("pre-1") is True
        assert repo.get("pre-1") is None
        assert repo.delete("pre-1") is False

    def test_count(self, repo) -> None:
        assert repo.count() == 0
        repo.create(_make_preset())
        assert repo.count() == 1

    def test_duplicate_id_raises_store_error(self, repo) -> None:
        repo.create(_make_preset())
        with pytest.raises(PresetStoreError):
            repo.create(_make_preset())

    def test_closed_database_raises_store_error(self, db, repo) -> None:
        db.connection.close()
        with pytest.raises(PresetStoreError):
            repo.list_all()


class TestPresetHelpers:
    def test_new_preset(self) -> None:
        preset = new_preset("Card", DEFAULT_STATE, category="effects", tags=["glass"])
        assert len(preset.id) == 12
        assert preset.category is PresetCategory.EFFECTS
        assert preset.tags == ("glass",)
        assert preset.created_at

    def test_new_preset_unknown_category(self) -> None:
        with pytest.raises(ValueError):
            new_preset("Card", DEFAULT_STATE, category="misc")

    def test_preset_to_dict(self) -> None:
        data = preset_to_dict(_make_preset(is_public=True))
        assert data["isPublic"] is True
        assert data["category"] == "custom"
        assert data["state"]["tag"] == "h1"
        assert data["createdAt"] == "2025-01-15T10:00:00Z"


class TestConcurrentAccess:
    def test_parallel_writes_are_all_kept(self, tmp_path) -> None:
        database = Database(str(tmp_path / "presets.db"))
        database.connect()
        run_migrations(database)
        repo = PresetRepository(database)

        def worker(n: int) -> int:
            for i in range(50):
                repo.create(_make_preset(id=f"p-{n}-{i}", name=f"Preset {n}-{i}"))
                repo.list_all()
            return n

        with ThreadPoolExecutor(max_workers=8) as pool:
            done = list(pool.map(worker, range(8)))

        assert done == list(range(8))
        assert repo.count() == 400
        database.close()
