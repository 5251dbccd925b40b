"""Static shape of a StyleState: field groups, leaf kinds and value coercion.

The tree is known up front, so merging and validation walk these tables
instead of inspecting arbitrary objects.
"""

from __future__ import annotations

import math
from enum import StrEnum
from typing import Any

from styleforge.model.enums import (
    BlendMode,
    BorderStyle,
    FontFamily,
    FontWeight,
    LetterSpacing,
    PositionType,
    Shadow,
    TextAlign,
)
from styleforge.model.state import (
    Appearance,
    Border,
    BorderRadius,
    Effects,
    Margin,
    Padding,
    Position,
    Size,
    Transforms,
    Transforms3D,
    Typography,
)
from styleforge.units import format_number

# Leaf kinds. Enum classes are used directly as their own kind.
STRING = "string"
NUMBER = "number"
COLOR = "color"
CLASSES = "classes"

LeafKind = str | type[StrEnum]

SCALAR_FIELDS: dict[str, LeafKind] = {
    "element_id": STRING,
    "tag": STRING,
    "text_content": STRING,
    "link": STRING,
    "inline_css": STRING,
    "tailwind_classes": CLASSES,
}

RADIUS_FIELDS: dict[str, LeafKind] = {
    "all": NUMBER, "tl": NUMBER, "tr": NUMBER, "br": NUMBER, "bl": NUMBER,
}

GROUP_FIELDS: dict[str, dict[str, LeafKind]] = {
    "padding": {"l": STRING, "t": STRING, "r": STRING, "b": STRING},
    "margin": {"x": STRING, "y": STRING},
    "position": {
        "type": PositionType,
        "l": STRING, "t": STRING, "r": STRING, "b": STRING,
        "z_index": STRING,
    },
    "size": {
        "width": STRING, "height": STRING,
        "max_width": STRING, "max_height": STRING,
        "min_width": STRING, "min_height": STRING,
    },
    "typography": {
        "font_family": FontFamily,
        "font_size": STRING,
        "font_weight": FontWeight,
        "line_height": STRING,
        "letter_spacing": LetterSpacing,
        "text_align": TextAlign,
        "text_color": COLOR,
    },
    "transforms": {
        "translate_x": NUMBER, "translate_y": NUMBER, "rotate": NUMBER,
        "scale": NUMBER, "skew_x": NUMBER, "skew_y": NUMBER,
    },
    "transforms_3d": {
        "rotate_x": NUMBER, "rotate_y": NUMBER, "rotate_z": NUMBER, "perspective": NUMBER,
    },
    "border": {
        "color": COLOR,
        "width": STRING,
        "style": BorderStyle,
        "ring_color": COLOR,
    },
    "effects": {
        "shadow": Shadow,
        "opacity": NUMBER, "blur": NUMBER, "backdrop_blur": NUMBER,
        "hue_rotate": NUMBER, "saturation": NUMBER, "brightness": NUMBER,
        "contrast": NUMBER, "grayscale": NUMBER, "invert": NUMBER, "sepia": NUMBER,
    },
    "appearance": {
        "background_color": COLOR,
        "background_image": STRING,
        "blend_mode": BlendMode,
    },
}

# Two-level groups: group -> nested key -> leaf table.
DEEP_FIELDS: dict[str, dict[str, dict[str, LeafKind]]] = {
    "border": {"radius": RADIUS_FIELDS},
}

GROUP_TYPES: dict[str, type] = {
    "padding": Padding,
    "margin": Margin,
    "position": Position,
    "size": Size,
    "typography": Typography,
    "transforms": Transforms,
    "transforms_3d": Transforms3D,
    "border": Border,
    "effects": Effects,
    "appearance": Appearance,
}

DEEP_TYPES: dict[tuple[str, str], type] = {
    ("border", "radius"): BorderRadius,
}


def coerce_value(kind: LeafKind, value: Any) -> Any:
    """Coerce *value* to the leaf *kind*, raising ValueError when impossible."""
    if kind == STRING:
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            text = format_number(value)
            if text:
                return text
        raise ValueError(f"expected a string, got {value!r}")

    if kind == NUMBER:
        if isinstance(value, bool) or value is None:
            raise ValueError(f"expected a number, got {value!r}")
        if isinstance(value, (int, float)):
            if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
                raise ValueError(f"expected a finite number, got {value!r}")
            return value
        if isinstance(value, str):
            text = value.strip()
            try:
                return int(text)
            except ValueError:
                number = float(text)
                if math.isnan(number) or math.isinf(number):
                    raise ValueError(f"expected a finite number, got {value!r}") from None
                return number
        raise ValueError(f"expected a number, got {value!r}")

    if kind == COLOR:
        if value is None:
            return None
        if isinstance(value, str):
            return value.strip() or None
        raise ValueError(f"expected a colour string or null, got {value!r}")

    if kind == CLASSES:
        if isinstance(value, str):
            return tuple(value.split())
        if isinstance(value, (list, tuple)):
            return tuple(str(token) for token in value if str(token).strip())
        raise ValueError(f"expected a list of class names, got {value!r}")

    if isinstance(kind, type) and issubclass(kind, StrEnum):
        if isinstance(value, kind):
            return value
        if isinstance(value, str):
            return kind(value.strip().lower())
        raise ValueError(f"expected one of {[m.value for m in kind]}, got {value!r}")

    raise ValueError(f"unknown field kind {kind!r}")


def leaf_kind(key: str, nested_key: str | None = None, deep_key: str | None = None) -> LeafKind:
    """Look up the kind of a leaf path, raising KeyError for unknown paths."""
    if nested_key is None:
        if key in SCALAR_FIELDS:
            return SCALAR_FIELDS[key]
        raise KeyError(key)
    if deep_key is None:
        return GROUP_FIELDS[key][nested_key]
    return DEEP_FIELDS[key][nested_key][deep_key]
