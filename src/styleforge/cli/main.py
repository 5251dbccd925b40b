"""Styleforge CLI entry point."""
from __future__ import annotations

import json

import click

FORMATS = ("html", "css", "classes", "styles", "json")


def _load_json(path: str) -> dict:
    with click.open_file(path, "r", encoding="utf-8") as fh:
        try:
            data = json.load(fh)
        except json.JSONDecodeError as exc:
            raise click.ClickException(f"{path}: invalid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise click.ClickException(f"{path}: expected a JSON object")
    return data


def _open_db(db: str):
    from styleforge.store.db import Database
    from styleforge.store.migrations import run_migrations

    database = Database(db)
    database.connect()
    run_migrations(database)
    return database


@click.group()
def cli():
    """Styleforge: visual style editing core."""
    pass


@cli.command()
@click.argument("state_file", type=click.Path(allow_dash=True))
@click.option("--format", "fmt", type=click.Choice(FORMATS), default="html", help="Output format")
@click.option("--breakpoint", "bp", default=None, help="Breakpoint to export (default: from file or base)")
@click.option("--resolve-shadow", is_flag=True, help="Emit a concrete box-shadow instead of a comment")
def export(state_file: str, fmt: str, bp: str | None, resolve_shadow: bool) -> None:
    """Export a saved state as HTML, CSS, classes or styles.

    STATE_FILE holds either a bare state or ``{state, overrides, breakpoint}``.
    """
    from styleforge.config import StyleforgeConfig
    from styleforge.engine.session import EditingSession
    from styleforge.generators.export import export_bundle

    data = _load_json(state_file)
    if isinstance(data.get("state"), dict):
        state, overrides = data["state"], data.get("overrides") or {}
        bp = bp or data.get("breakpoint")
    else:
        state, overrides = data, {}
    try:
        session = EditingSession.from_dict(state, overrides, bp or "base")
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--breakpoint") from exc

    config = StyleforgeConfig.from_env()
    bundle = export_bundle(session, resolve_shadow=resolve_shadow, placeholder=config.placeholder_selector)
    if fmt == "json":
        click.echo(json.dumps(bundle, indent=2))
    elif fmt == "styles":
        click.echo(json.dumps(bundle["styles"], indent=2))
    else:
        click.echo(bundle[fmt])


@cli.command()
@click.option("--category", default=None, help="Only templates in this category")
@click.option("--query", "-q", default="", help="Filter by name or description")
def templates(category: str | None, query: str) -> None:
    """List built-in component templates."""
    from styleforge.catalog.templates import list_templates

    for template in list_templates(category, query):
        click.echo(f"{template.id:<16} {template.category:<11} {template.name}")


@cli.group()
def presets():
    """Manage saved style presets."""
    pass


@presets.command("list")
@click.option("--db", default="styleforge.db", help="Database path")
@click.option("--query", "-q", default="", help="Filter by name")
def list_presets(db: str, query: str) -> None:
    """List saved presets, newest first."""
    from styleforge.store.repositories import PresetRepository

    database = _open_db(db)
    try:
        for preset in PresetRepository(database).list_all(query):
            click.echo(f"{preset.id}  {preset.category:<11} {preset.name}")
    finally:
        database.close()


@presets.command("save")
@click.argument("name")
@click.option("--state", "state_file", required=True, type=click.Path(exists=True), help="State JSON file")
@click.option("--description", default="", help="Preset description")
@click.option(
    "--category",
    type=click.Choice(["custom", "typography", "layout", "effects", "colors"]),
    default="custom",
    help="Preset category",
)
@click.option("--public/--private", default=False, help="Share the preset")
@click.option("--db", default="styleforge.db", help="Database path")
def save_preset(name: str, state_file: str, description: str, category: str, public: bool, db: str) -> None:
    """Save a state file as a named preset."""
    from styleforge.engine.merge import state_from_dict
    from styleforge.store.repositories import PresetRepository, new_preset

    data = _load_json(state_file)
    state = data["state"] if isinstance(data.get("state"), dict) else data
    preset = new_preset(
        name=name,
        state=state_from_dict(state),
        description=description,
        category=category,
        is_public=public,
    )
    database = _open_db(db)
    try:
        PresetRepository(database).create(preset)
    finally:
        database.close()
    click.echo(f"Preset saved: {preset.id}")


@presets.command("delete")
@click.argument("preset_id")
@click.option("--db", default="styleforge.db", help="Database path")
def delete_preset(preset_id: str, db: str) -> None:
    """Delete a preset by id."""
    from styleforge.store.repositories import PresetRepository

    database = _open_db(db)
    try:
        deleted = PresetRepository(database).delete(preset_id)
    finally:
        database.close()
    if not deleted:
        raise click.ClickException(f"Preset not found: {preset_id}")
    click.echo(f"Preset deleted: {preset_id}")


@cli.command()
@click.argument("prompt")
@click.option("--state", "state_file", default=None, type=click.Path(exists=True), help="Current state JSON file")
@click.option("--apply", "apply_changes", is_flag=True, help="Print the merged state instead of the changes")
def style(prompt: str, state_file: str | None, apply_changes: bool) -> None:
    """Ask the styling assistant to change a state."""
    from styleforge.ai.styler import AIStyler, HttpStylerBackend
    from styleforge.config import StyleforgeConfig
    from styleforge.engine.session import EditingSession
    from styleforge.model.wire import patch_to_wire

    config = StyleforgeConfig.from_env()
    state = _load_json(state_file) if state_file else {}
    session = EditingSession.from_dict(state)

    backend = HttpStylerBackend.from_config(config)
    try:
        result = AIStyler(backend).apply_prompt(prompt, session.state)
    finally:
        backend.close()
    if not result.success:
        raise click.ClickException(result.message)

    click.echo(result.message, err=True)
    if apply_changes:
        output = session.apply_ai_result(result).to_dict()["state"]
    else:
        output = patch_to_wire(result.changes)
    click.echo(json.dumps(output, indent=2))


@cli.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
@click.option("--db", default=None, help="Database path")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str | None, port: int | None, db: str | None, debug: bool) -> None:
    """Start the Styleforge API server."""
    from dataclasses import replace

    from styleforge.config import StyleforgeConfig
    from styleforge.web.app import create_app

    config = StyleforgeConfig.from_env()
    config = replace(
        config,
        host=host or config.host,
        port=port or config.port,
        db_path=db or config.db_path,
    )
    database = _open_db(config.db_path)

    app = create_app(db=database, config=config)
    click.echo(f"Starting Styleforge on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=debug)
