from __future__ import annotations

from styleforge.model.enums import (
    BREAKPOINT_ORDER,
    BlendMode,
    BorderStyle,
    Breakpoint,
    FontFamily,
    FontWeight,
    LetterSpacing,
    PositionType,
    Shadow,
    TextAlign,
)
from styleforge.model.element import ElementData, element_data
from styleforge.model.state import (
    ALLOWED_TAGS,
    DEFAULT_STATE,
    NULLABLE_FIELDS,
    TAG_OPTIONS,
    Appearance,
    Border,
    BorderRadius,
    Effects,
    Margin,
    Padding,
    Position,
    Size,
    StyleState,
    Transforms,
    Transforms3D,
    Typography,
)
from styleforge.model.wire import normalize_patch, state_to_dict

__all__ = [
    # enums
    "BREAKPOINT_ORDER",
    "Breakpoint",
    "PositionType",
    "FontFamily",
    "FontWeight",
    "LetterSpacing",
    "TextAlign",
    "BorderStyle",
    "Shadow",
    "BlendMode",
    # state
    "Padding",
    "Margin",
    "Position",
    "Size",
    "Typography",
    "Transforms",
    "Transforms3D",
    "BorderRadius",
    "Border",
    "Effects",
    "Appearance",
    "StyleState",
    "DEFAULT_STATE",
    "ALLOWED_TAGS",
    "NULLABLE_FIELDS",
    "TAG_OPTIONS",
    # element export
    "ElementData",
    "element_data",
    # wire
    "normalize_patch",
    "state_to_dict",
]
