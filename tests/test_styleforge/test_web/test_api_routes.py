from __future__ import annotations

import pytest

from styleforge.web.app import create_app


# ---------------------------------------------------------------------------
# /api/render
# ---------------------------------------------------------------------------


class TestRenderAPI:
    def test_default_state(self, client):
        response = client.post("/api/render", json={})
        assert response.status_code == 200
        data = response.get_json()
        assert data["breakpoint"] == "base"
        assert data["classes"] == ""
        assert data["allClasses"] == ""
        assert data["styles"] == {}
        assert data["html"] == "<div>\n  \n</div>"
        assert data["css"] == ".element {\n}"
        assert data["element"]["tagName"] == "div"

    def test_state_with_colours_and_classes(self, client):
        response = client.post(
            "/api/render",
            json={
                "state": {
                    "tag": "button",
                    "textContent": "Go",
                    "tailwindClasses": ["flex"],
                    "typography": {"fontWeight": "bold", "textColor": "#fff"},
                },
            },
        )
        data = response.get_json()
        assert data["classes"] == "font-bold flex"
        assert data["styles"] == {"color": "#fff"}
        assert data["html"] == '<button class="font-bold flex" style="color: #fff">\n  Go\n</button>'

    def test_breakpoint_overrides(self, client):
        response = client.post(
            "/api/render",
            json={
                "state": {"typography": {"textAlign": "center"}},
                "overrides": {"md": {"typography": {"textAlign": "right"}}},
                "breakpoint": "md",
            },
        )
        data = response.get_json()
        assert data["breakpoint"] == "md"
        assert data["classes"] == "md:text-right"
        assert data["allClasses"] == "text-center md:text-right"

    def test_resolve_shadow(self, client):
        body = {"state": {"effects": {"shadow": "sm"}}}
        plain = client.post("/api/render", json=body).get_json()
        assert "/* shadow-sm */" in plain["css"]
        resolved = client.post("/api/render", json={**body, "resolveShadow": True}).get_json()
        assert "box-shadow: 0 1px 2px 0 rgb(0 0 0 / 0.05);" in resolved["css"]

    def test_unknown_breakpoint_returns_400(self, client):
        response = client.post("/api/render", json={"breakpoint": "xxl"})
        assert response.status_code == 400
        assert "error" in response.get_json()

    def test_unknown_override_breakpoint_returns_400(self, client):
        response = client.post("/api/render", json={"overrides": {"huge": {}}})
        assert response.status_code == 400

    def test_non_object_state_returns_400(self, client):
        response = client.post("/api/render", json={"state": [1, 2]})
        assert response.status_code == 400

    def test_placeholder_selector_from_config(self, db):
        from styleforge.ai.styler import AIStyler, StubStylerBackend
        from styleforge.config import StyleforgeConfig

        app = create_app(
            db=db,
            config=StyleforgeConfig(placeholder_selector=".preview"),
            styler=AIStyler(StubStylerBackend()),
        )
        data = app.test_client().post("/api/render", json={}).get_json()
        assert data["css"].startswith(".preview {")

    def test_cors_headers(self, client):
        response = client.post("/api/render", json={})
        assert response.headers["Access-Control-Allow-Origin"] == "*"

    def test_preflight(self, client):
        response = client.options("/api/render")
        assert response.status_code == 204
        assert response.headers["Access-Control-Allow-Origin"] == "*"


# ---------------------------------------------------------------------------
# /api/patch
# ---------------------------------------------------------------------------


class TestPatchAPI:
    def test_merges_changes(self, client):
        response = client.post(
            "/api/patch",
            json={
                "state": {"border": {"radius": {"tl": 4}}},
                "changes": {"border": {"radius": {"br": 8}}, "tag": "span"},
            },
        )
        assert response.status_code == 200
        state = response.get_json()["state"]
        assert state["tag"] == "span"
        assert state["border"]["radius"]["tl"] == 4
        assert state["border"]["radius"]["br"] == 8

    def test_non_object_changes_returns_400(self, client):
        response = client.post("/api/patch", json={"changes": "bigger"})
        assert response.status_code == 400


# ---------------------------------------------------------------------------
# /api/ai-style
# ---------------------------------------------------------------------------


class TestAIStyleAPI:
    def test_applies_changes(self, client, backend):
        response = client.post(
            "/api/ai-style",
            json={"prompt": "add a shadow", "currentState": {"tag": "section"}},
        )
        assert response.status_code == 200
        data = response.get_json()
        assert data["changes"] == {"effects": {"shadow": "lg"}}
        assert data["message"] == "Added large shadow"
        assert data["state"]["effects"]["shadow"] == "lg"
        assert data["state"]["tag"] == "section"
        assert backend.calls == ["add a shadow"]

    def test_camel_case_changes(self, client):
        data = client.post("/api/ai-style", json={"prompt": "center it"}).get_json()
        assert data["changes"] == {"typography": {"textAlign": "center"}}

    @pytest.mark.parametrize("body", [{}, {"prompt": ""}, {"prompt": "   "}, {"prompt": 5}])
    def test_missing_prompt_returns_400(self, client, backend, body):
        response = client.post("/api/ai-style", json=body)
        assert response.status_code == 400
        assert response.get_json() == {"error": "Prompt is required"}
        assert backend.calls == []

    def test_non_object_state_returns_400(self, client):
        response = client.post("/api/ai-style", json={"prompt": "x", "currentState": "div"})
        assert response.status_code == 400

    def test_backend_failure_returns_502(self, failing_app):
        response = failing_app.test_client().post("/api/ai-style", json={"prompt": "bigger"})
        assert response.status_code == 502
        assert response.get_json() == {"error": "upstream down"}


# ---------------------------------------------------------------------------
# /api/templates
# ---------------------------------------------------------------------------


class TestTemplatesAPI:
    def test_lists_all(self, client):
        data = client.get("/api/templates").get_json()
        assert len(data["templates"]) == 8

    def test_filters_by_category(self, client):
        data = client.get("/api/templates?category=buttons").get_json()
        assert {t["category"] for t in data["templates"]} == {"buttons"}

    def test_filters_by_query(self, client):
        data = client.get("/api/templates?q=elevated").get_json()
        assert [t["id"] for t in data["templates"]] == ["card-elevated"]

    def test_detail(self, client):
        data = client.get("/api/templates/btn-primary").get_json()
        assert data["id"] == "btn-primary"
        assert data["category"] == "buttons"

    def test_detail_missing_returns_404(self, client):
        assert client.get("/api/templates/nope").status_code == 404


# ---------------------------------------------------------------------------
# /api/tags
# ---------------------------------------------------------------------------


class TestTagsAPI:
    def test_lists_picker_and_allowed_tags(self, client):
        data = client.get("/api/tags").get_json()
        assert data["options"][0] == "div"
        assert "button" in data["options"]
        assert "input" not in data["options"]
        assert "input" in data["allowed"]
        assert set(data["options"]) <= set(data["allowed"])
