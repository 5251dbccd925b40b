from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from styleforge.catalog.templates import get_template, list_templates, template_to_dict
from styleforge.engine.session import EditingSession
from styleforge.generators.export import export_bundle
from styleforge.model.state import ALLOWED_TAGS, TAG_OPTIONS
from styleforge.model.wire import patch_to_wire

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "authorization, content-type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


@api_bp.route("/render", methods=["OPTIONS"])
@api_bp.route("/patch", methods=["OPTIONS"])
@api_bp.route("/ai-style", methods=["OPTIONS"])
def preflight():
    """Handle CORS preflight for the JSON endpoints."""
    return "", 204


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@api_bp.route("/render", methods=["POST"])
def render():
    """Generate classes, inline styles, HTML and CSS for a state."""
    data = _json_body()
    state = data.get("state") or {}
    overrides = data.get("overrides") or {}
    if not isinstance(state, dict) or not isinstance(overrides, dict):
        return jsonify({"error": "state and overrides must be objects"}), 400
    try:
        session = EditingSession.from_dict(state, overrides, data.get("breakpoint") or "base")
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    config = current_app.config["STYLEFORGE"]
    bundle = export_bundle(
        session,
        resolve_shadow=bool(data.get("resolveShadow", False)),
        placeholder=config.placeholder_selector,
    )
    return jsonify(bundle)


@api_bp.route("/patch", methods=["POST"])
def patch():
    """Deep-merge ``changes`` into ``state`` and return the merged state."""
    data = _json_body()
    state = data.get("state") or {}
    changes = data.get("changes") or {}
    if not isinstance(state, dict) or not isinstance(changes, dict):
        return jsonify({"error": "state and changes must be objects"}), 400
    session = EditingSession.from_dict(state).apply_patch(changes)
    return jsonify({"state": session.to_dict()["state"]})


@api_bp.route("/ai-style", methods=["POST"])
def ai_style():
    """Turn a natural-language prompt into state changes."""
    data = _json_body()
    prompt = data.get("prompt")
    if not isinstance(prompt, str) or not prompt.strip():
        return jsonify({"error": "Prompt is required"}), 400
    current_state = data.get("currentState") or {}
    if not isinstance(current_state, dict):
        return jsonify({"error": "currentState must be an object"}), 400

    styler = current_app.extensions["styler"]
    result = styler.apply_prompt(prompt, current_state)
    if not result.success:
        return jsonify({"error": result.message}), 502
    session = EditingSession.from_dict(current_state).apply_ai_result(result)
    return jsonify({
        "changes": patch_to_wire(result.changes),
        "message": result.message,
        "state": session.to_dict()["state"],
    })


@api_bp.route("/templates")
def templates():
    """List built-in component templates."""
    category = request.args.get("category") or None
    query = request.args.get("q", "")
    return jsonify({
        "templates": [template_to_dict(t) for t in list_templates(category, query)],
    })


@api_bp.route("/templates/<template_id>")
def template_detail(template_id: str):
    template = get_template(template_id)
    if template is None:
        return jsonify({"error": "not found"}), 404
    return jsonify(template_to_dict(template))


@api_bp.route("/tags")
def tag_options():
    """Tag choices for the element picker and the render-time whitelist."""
    return jsonify({"options": list(TAG_OPTIONS), "allowed": list(ALLOWED_TAGS)})
