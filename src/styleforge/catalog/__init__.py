from __future__ import annotations

from styleforge.catalog.templates import (
    BUILTIN_TEMPLATES,
    Template,
    TemplateCategory,
    get_template,
    list_templates,
    template_to_dict,
)

__all__ = [
    "BUILTIN_TEMPLATES",
    "Template",
    "TemplateCategory",
    "get_template",
    "list_templates",
    "template_to_dict",
]
