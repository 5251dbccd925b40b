from __future__ import annotations

from styleforge.generators.classes import generate_all_classes, generate_classes, generated_tokens
from styleforge.generators.export import PLACEHOLDER_SELECTOR, export_bundle, to_css, to_html
from styleforge.generators.inline_css import (
    beautify_css,
    invalid_utility_classes,
    is_valid_inline_css,
    is_valid_utility_class,
    minify_css,
    split_classes,
)
from styleforge.generators.preview import (
    ContrastCheck,
    aria_attributes,
    check_contrast,
    contrast_ratio,
    preview_styles,
)
from styleforge.generators.styles import generate_styles, parse_inline_css, style_attribute

__all__ = [
    # classes
    "generate_classes",
    "generate_all_classes",
    "generated_tokens",
    # inline styles
    "generate_styles",
    "parse_inline_css",
    "style_attribute",
    # export
    "PLACEHOLDER_SELECTOR",
    "to_html",
    "to_css",
    "export_bundle",
    # preview
    "preview_styles",
    "aria_attributes",
    "contrast_ratio",
    "check_contrast",
    "ContrastCheck",
    # code helpers
    "split_classes",
    "is_valid_utility_class",
    "invalid_utility_classes",
    "is_valid_inline_css",
    "beautify_css",
    "minify_css",
]
