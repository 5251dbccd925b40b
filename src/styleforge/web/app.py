from __future__ import annotations

from flask import Flask

from styleforge.ai.styler import AIStyler, HttpStylerBackend
from styleforge.config import StyleforgeConfig
from styleforge.store.db import Database
from styleforge.store.migrations import run_migrations
from styleforge.store.repositories import PresetRepository


def create_app(
    db: Database | None = None,
    config: StyleforgeConfig | None = None,
    styler: AIStyler | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    config = config or StyleforgeConfig()
    app.config["STYLEFORGE"] = config

    if db is None:
        db = Database(":memory:")
        db.connect()
        run_migrations(db)

    if styler is None:
        styler = AIStyler(HttpStylerBackend.from_config(config))

    app.extensions["db"] = db
    app.extensions["preset_repo"] = PresetRepository(db)
    app.extensions["styler"] = styler

    from styleforge.web.routes.api import api_bp
    from styleforge.web.routes.presets import presets_bp

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(presets_bp, url_prefix="/presets")

    return app
