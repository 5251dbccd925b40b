"""Vercel serverless entry point for Styleforge."""
import sys
import os

# Add src to path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from styleforge.config import StyleforgeConfig
from styleforge.store.db import Database
from styleforge.store.migrations import run_migrations
from styleforge.web.app import create_app

# In-memory DB for serverless demo
db = Database(":memory:")
db.connect()
run_migrations(db)

# Seed presets from the built-in templates so the demo isn't empty
from styleforge.catalog.templates import BUILTIN_TEMPLATES
from styleforge.engine.session import EditingSession
from styleforge.store.repositories import PresetCategory, PresetRepository, new_preset

repo = PresetRepository(db)
for template in BUILTIN_TEMPLATES[:3]:
    repo.create(
        new_preset(
            name=template.name,
            state=EditingSession().apply_template(template).state,
            description=template.description,
            category=PresetCategory.CUSTOM,
            is_public=True,
        )
    )

app = create_app(db=db, config=StyleforgeConfig.from_env())
