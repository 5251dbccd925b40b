"""Tests for the built-in template catalog."""
from __future__ import annotations

from styleforge.catalog import (
    BUILTIN_TEMPLATES,
    TemplateCategory,
    get_template,
    list_templates,
    template_to_dict,
)
from styleforge.engine import EditingSession
from styleforge.generators.classes import generate_classes
from styleforge.model import Shadow, normalize_patch


class TestCatalog:
    def test_ids_are_unique(self) -> None:
        ids = [t.id for t in BUILTIN_TEMPLATES]
        assert len(ids) == len(set(ids))
        assert "btn-primary" in ids
        assert "layout-section" in ids

    def test_every_template_state_is_a_valid_patch(self) -> None:
        for template in BUILTIN_TEMPLATES:
            patch = normalize_patch(template.state)
            assert set(patch) == set(template.state), template.id

    def test_get_template(self) -> None:
        assert get_template("card-basic").category is TemplateCategory.CARDS
        assert get_template("missing") is None


class TestListTemplates:
    def test_all(self) -> None:
        assert list_templates() == BUILTIN_TEMPLATES
        assert list_templates("all") == BUILTIN_TEMPLATES

    def test_by_category(self) -> None:
        buttons = list_templates(TemplateCategory.BUTTONS)
        assert [t.id for t in buttons] == ["btn-primary", "btn-outline", "btn-ghost"]
        assert list_templates("inputs")[0].id == "input-default"

    def test_query_matches_name_and_description(self) -> None:
        assert [t.id for t in list_templates(query="ELEVATED")] == ["card-elevated"]
        assert [t.id for t in list_templates(query="wrapper")] == ["layout-section"]
        assert list_templates("cards", query="button") == ()


class TestApplyingTemplates:
    def test_card_elevated(self) -> None:
        session = EditingSession().apply_template(get_template("card-elevated"))
        assert session.state.effects.shadow is Shadow.XL
        classes = generate_classes(session.state)
        assert "shadow-xl" in classes
        assert "rounded-tl-[16px] rounded-tr-[16px] rounded-br-[16px] rounded-bl-[16px]" in classes

    def test_section_margin(self) -> None:
        session = EditingSession().apply_template(get_template("layout-section"))
        assert session.state.margin.x == "auto"
        assert session.state.size.max_width == "1200px"

    def test_to_dict_uses_wire_keys(self) -> None:
        data = template_to_dict(get_template("btn-outline"))
        assert data["category"] == "buttons"
        assert data["state"]["textContent"] == "Learn More"
        assert data["state"]["border"]["ringColor"] is None
        assert data["state"]["typography"]["fontWeight"] == "medium"
