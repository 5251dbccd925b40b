from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from styleforge.engine.merge import state_from_dict
from styleforge.store.repositories import (
    PresetCategory,
    PresetStoreError,
    new_preset,
    preset_to_dict,
)

logger = logging.getLogger(__name__)

presets_bp = Blueprint("presets", __name__)


@presets_bp.errorhandler(PresetStoreError)
def store_error(exc: PresetStoreError):
    logger.error("Preset store error: %s", exc)
    return jsonify({"error": str(exc)}), 500


@presets_bp.route("")
def list_presets():
    """List saved presets, newest first; ``?q=`` filters by name."""
    preset_repo = current_app.extensions["preset_repo"]
    presets = preset_repo.list_all(request.args.get("q", ""))
    return jsonify({"presets": [preset_to_dict(p) for p in presets]})


@presets_bp.route("", methods=["POST"])
def create_preset():
    """Save the posted state as a preset."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "JSON object required"}), 400
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        return jsonify({"error": "name required"}), 400
    description = data.get("description") or ""
    if not isinstance(description, str):
        return jsonify({"error": "description must be a string"}), 400
    tags = data.get("tags") or []
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        return jsonify({"error": "tags must be a list of strings"}), 400
    state = data.get("state")
    if not isinstance(state, dict):
        return jsonify({"error": "state must be an object"}), 400
    try:
        category = PresetCategory(data.get("category") or PresetCategory.CUSTOM)
    except ValueError:
        return jsonify({"error": f"unknown category {data.get('category')!r}"}), 400

    preset = new_preset(
        name=name.strip(),
        state=state_from_dict(state),
        description=description.strip(),
        category=category,
        is_public=bool(data.get("isPublic", False)),
        tags=tuple(t.strip() for t in tags if t.strip()),
    )
    preset_repo = current_app.extensions["preset_repo"]
    preset_repo.create(preset)
    return jsonify(preset_to_dict(preset)), 201


@presets_bp.route("/<preset_id>")
def preset_detail(preset_id: str):
    preset_repo = current_app.extensions["preset_repo"]
    preset = preset_repo.get(preset_id)
    if preset is None:
        return jsonify({"error": "not found"}), 404
    return jsonify(preset_to_dict(preset))


@presets_bp.route("/<preset_id>", methods=["DELETE"])
def delete_preset(preset_id: str):
    preset_repo = current_app.extensions["preset_repo"]
    if not preset_repo.delete(preset_id):
        return jsonify({"error": "not found"}), 404
    return "", 204
