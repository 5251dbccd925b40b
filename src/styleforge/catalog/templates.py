"""Built-in component templates.

A template's ``state`` is a partial snake_case state. Applying one is a
deep merge into the current base state, so fields a template does not name
keep their current values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Mapping

from styleforge.model.wire import to_wire_key


class TemplateCategory(StrEnum):
    BUTTONS = "buttons"
    CARDS = "cards"
    INPUTS = "inputs"
    NAVIGATION = "navigation"
    LAYOUT = "layout"


@dataclass(frozen=True)
class Template:
    id: str
    name: str
    description: str
    category: TemplateCategory
    state: Mapping[str, Any] = field(default_factory=dict, hash=False, compare=False)


PRIMARY = "hsl(217 91% 60%)"
MUTED = "hsl(215 20% 65%)"


def _radius(px: int) -> dict[str, int]:
    return {"all": px, "tl": px, "tr": px, "br": px, "bl": px}


def _padding(x: str, y: str) -> dict[str, str]:
    return {"l": x, "t": y, "r": x, "b": y}


def _template(id: str, name: str, description: str, category: TemplateCategory, state: dict) -> Template:
    return Template(
        id=id,
        name=name,
        description=description,
        category=category,
        state=MappingProxyType(state),
    )


BUILTIN_TEMPLATES: tuple[Template, ...] = (
    _template(
        "btn-primary",
        "Primary Button",
        "A solid primary action button",
        TemplateCategory.BUTTONS,
        {
            "tag": "button",
            "text_content": "Click me",
            "padding": _padding("16", "8"),
            "border": {"radius": _radius(8)},
            "typography": {"font_weight": "medium"},
            "appearance": {"background_color": PRIMARY},
        },
    ),
    _template(
        "btn-outline",
        "Outline Button",
        "A bordered outline button",
        TemplateCategory.BUTTONS,
        {
            "tag": "button",
            "text_content": "Learn More",
            "padding": _padding("16", "8"),
            "border": {
                "color": PRIMARY,
                "width": "2",
                "style": "solid",
                "ring_color": None,
                "radius": _radius(8),
            },
            "typography": {"font_weight": "medium", "text_color": PRIMARY},
        },
    ),
    _template(
        "btn-ghost",
        "Ghost Button",
        "A subtle ghost button",
        TemplateCategory.BUTTONS,
        {
            "tag": "button",
            "text_content": "Cancel",
            "padding": _padding("16", "8"),
            "border": {"radius": _radius(8)},
            "typography": {"text_color": MUTED},
        },
    ),
    _template(
        "card-basic",
        "Basic Card",
        "A simple card with shadow",
        TemplateCategory.CARDS,
        {
            "tag": "div",
            "text_content": "Card Content",
            "padding": _padding("24", "24"),
            "border": {
                "color": "hsl(217 33% 17%)",
                "width": "1",
                "style": "solid",
                "ring_color": None,
                "radius": _radius(12),
            },
            "effects": {"shadow": "md"},
            "appearance": {"background_color": "hsl(222 47% 11%)"},
        },
    ),
    _template(
        "card-elevated",
        "Elevated Card",
        "Card with stronger elevation",
        TemplateCategory.CARDS,
        {
            "tag": "div",
            "text_content": "Featured",
            "padding": _padding("32", "32"),
            "border": {"radius": _radius(16)},
            "effects": {"shadow": "xl"},
            "appearance": {"background_color": "hsl(222 47% 14%)"},
        },
    ),
    _template(
        "input-default",
        "Text Input",
        "Standard text input field",
        TemplateCategory.INPUTS,
        {
            "tag": "div",
            "text_content": "Enter text...",
            "padding": _padding("12", "8"),
            "border": {
                "color": "hsl(217 33% 25%)",
                "width": "1",
                "style": "solid",
                "ring_color": None,
                "radius": _radius(8),
            },
            "appearance": {"background_color": "hsl(222 47% 11%)"},
        },
    ),
    _template(
        "nav-link",
        "Nav Link",
        "Navigation menu link",
        TemplateCategory.NAVIGATION,
        {
            "tag": "a",
            "text_content": "Home",
            "padding": _padding("16", "8"),
            "border": {"radius": _radius(6)},
            "typography": {"font_weight": "medium", "text_color": MUTED},
        },
    ),
    _template(
        "layout-section",
        "Section Container",
        "Content section wrapper",
        TemplateCategory.LAYOUT,
        {
            "tag": "section",
            "text_content": "Section Content",
            "padding": {"l": "32", "t": "48", "r": "32", "b": "48"},
            "size": {"max_width": "1200px"},
            "margin": {"x": "auto", "y": "0"},
        },
    ),
)

_BY_ID = {t.id: t for t in BUILTIN_TEMPLATES}


def get_template(template_id: str) -> Template | None:
    return _BY_ID.get(template_id)


def list_templates(category: TemplateCategory | str | None = None, query: str = "") -> tuple[Template, ...]:
    """Filter templates by category and a case-insensitive name/description match.

    ``None``, ``""`` and ``"all"`` select every category.
    """
    needle = query.strip().lower()
    result = []
    for template in BUILTIN_TEMPLATES:
        if category not in (None, "", "all") and template.category != category:
            continue
        if needle and needle not in template.name.lower() and needle not in template.description.lower():
            continue
        result.append(template)
    return tuple(result)


def template_to_dict(template: Template) -> dict[str, Any]:
    """JSON form of a template; ``state`` uses camelCase wire keys."""
    return {
        "id": template.id,
        "name": template.name,
        "description": template.description,
        "category": str(template.category),
        "state": _plain(template.state),
    }


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {to_wire_key(k): _plain(v) for k, v in value.items()}
    return value
