"""Inline-style generation for rules utility classes cannot express.

Covers custom colours, 3D rotations, perspective, blend mode, background
image and the user's free-form inline CSS. Keys use camelCase.
"""

from __future__ import annotations

import re

from styleforge.model.enums import BlendMode
from styleforge.model.state import StyleState
from styleforge.units import format_number

__all__ = ["camel_to_kebab", "generate_styles", "kebab_to_camel", "parse_inline_css", "style_attribute"]

PERSPECTIVE_MULTIPLIER = 100

_KEBAB_RE = re.compile(r"-([a-z])")
_CAMEL_RE = re.compile(r"([A-Z])")


def kebab_to_camel(name: str) -> str:
    """``background-color`` -> ``backgroundColor``; ``-webkit-x`` -> ``WebkitX``."""
    return _KEBAB_RE.sub(lambda m: m.group(1).upper(), name)


def camel_to_kebab(name: str) -> str:
    """``backgroundColor`` -> ``background-color``."""
    return _CAMEL_RE.sub(r"-\1", name).lower()


def parse_inline_css(text: str) -> dict[str, str]:
    """Parse ``prop: value;`` pairs into a camelCase style map.

    Segments without a colon, or with an empty property or value, are
    skipped.
    """
    styles: dict[str, str] = {}
    if not text:
        return styles
    for segment in text.split(";"):
        prop, sep, value = segment.partition(":")
        if not sep:
            continue
        prop = prop.strip()
        value = value.strip()
        if not prop or not value:
            continue
        styles[kebab_to_camel(prop)] = value
    return styles


def generate_styles(state: StyleState) -> dict[str, str]:
    """Return the inline style map for *state*."""
    styles: dict[str, str] = {}

    if state.typography.text_color:
        styles["color"] = state.typography.text_color
    if state.appearance.background_color:
        styles["backgroundColor"] = state.appearance.background_color
    if state.border.color:
        styles["borderColor"] = state.border.color

    t3d = state.transforms_3d
    rotations = [
        f"{fn}({format_number(value)}deg)"
        for fn, value in (("rotateX", t3d.rotate_x), ("rotateY", t3d.rotate_y), ("rotateZ", t3d.rotate_z))
        if value != 0
    ]
    if rotations:
        styles["transform"] = " ".join(rotations)
    if t3d.perspective > 0:
        styles["perspective"] = f"{format_number(t3d.perspective * PERSPECTIVE_MULTIPLIER)}px"

    if state.appearance.blend_mode != BlendMode.NORMAL:
        styles["mixBlendMode"] = str(state.appearance.blend_mode)

    if state.appearance.background_image:
        styles["backgroundImage"] = f"url({state.appearance.background_image})"

    styles.update(parse_inline_css(state.inline_css))
    return styles


def style_attribute(styles: dict[str, str]) -> str:
    """Render a style map as an HTML ``style`` attribute value."""
    return "; ".join(f"{camel_to_kebab(k)}: {v}" for k, v in styles.items())
