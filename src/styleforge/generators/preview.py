"""Live-preview helpers: the concrete style map for the preview box, ARIA
attributes and the text/background contrast contract."""

from __future__ import annotations

from dataclasses import dataclass

from styleforge.generators.values import (
    build_border,
    build_border_radius,
    build_filters,
    build_margin,
    build_padding,
    build_transforms,
    validate_tag,
)
from styleforge.model.enums import BlendMode, FontWeight, TextAlign
from styleforge.model.state import StyleState
from styleforge.units import SIZE_KEYWORDS, format_number, normalize

MIN_CONTRAST_RATIO = 4.5  # WCAG AA
AAA_CONTRAST_RATIO = 7.0


def preview_styles(state: StyleState, generated: dict[str, str] | None = None) -> dict[str, str]:
    """Combine generated inline styles with concrete values for every rule.

    The preview renders without a utility-class stylesheet, so rules that
    are normally class tokens are resolved to CSS values here.
    """
    styles: dict[str, str] = dict(generated or {})

    transform = build_transforms(state)
    if transform:
        styles["transform"] = transform

    filters = build_filters(state)
    if filters:
        styles["filter"] = filters

    fx = state.effects
    if fx.backdrop_blur > 0:
        styles["backdropFilter"] = f"blur({format_number(fx.backdrop_blur)}px)"
    if fx.opacity != 100:
        styles["opacity"] = format_number(fx.opacity / 100)

    radius = build_border_radius(state)
    if radius:
        styles["borderRadius"] = radius
    border = build_border(state)
    if border:
        styles["border"] = border
    padding = build_padding(state)
    if padding:
        styles["padding"] = padding
    margin = build_margin(state)
    if margin:
        styles["margin"] = margin

    if state.size.width:
        styles["width"] = normalize(state.size.width, "px", SIZE_KEYWORDS)
    if state.size.height:
        styles["height"] = normalize(state.size.height, "px", SIZE_KEYWORDS)

    typo = state.typography
    if typo.font_size:
        styles["fontSize"] = normalize(typo.font_size, "px")
    if typo.font_weight != FontWeight.NORMAL:
        styles["fontWeight"] = str(typo.font_weight)
    if typo.text_align != TextAlign.LEFT:
        styles["textAlign"] = str(typo.text_align)
    if typo.text_color:
        styles["color"] = typo.text_color

    if state.appearance.background_color:
        styles["backgroundColor"] = state.appearance.background_color
    if state.appearance.blend_mode != BlendMode.NORMAL:
        styles["mixBlendMode"] = str(state.appearance.blend_mode)

    return {k: v for k, v in styles.items() if v}


def aria_attributes(state: StyleState) -> dict[str, str]:
    attrs: dict[str, str] = {}
    if state.text_content:
        attrs["aria-label"] = state.text_content
    tag = validate_tag(state.tag)
    if tag == "a":
        attrs["role"] = "link"
    elif tag == "button":
        attrs["role"] = "button"
    return attrs


# --- contrast -------------------------------------------------------------


def _channel(value: float) -> float:
    return value / 12.92 if value <= 0.03928 else ((value + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    """Relative luminance of a ``#rrggbb`` (or ``#rgb``) colour.

    Raises ValueError for anything else.
    """
    hex_value = color.strip().lstrip("#")
    if len(hex_value) == 3:
        hex_value = "".join(ch * 2 for ch in hex_value)
    if len(hex_value) != 6:
        raise ValueError(f"unsupported colour {color!r}")
    r, g, b = (int(hex_value[i:i + 2], 16) / 255 for i in (0, 2, 4))
    return 0.2126 * _channel(r) + 0.7152 * _channel(g) + 0.0722 * _channel(b)


def contrast_ratio(color1: str, color2: str) -> float:
    """WCAG contrast ratio; unparseable colours fall back to the AA threshold."""
    try:
        lum1 = relative_luminance(color1)
        lum2 = relative_luminance(color2)
    except ValueError:
        return MIN_CONTRAST_RATIO
    lighter, darker = max(lum1, lum2), min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


@dataclass(frozen=True)
class ContrastCheck:
    meets: bool
    ratio: float
    level: str  # "AAA", "AA", "fail"


def check_contrast(text_color: str, background_color: str) -> ContrastCheck:
    ratio = contrast_ratio(text_color, background_color)
    if ratio >= AAA_CONTRAST_RATIO:
        level = "AAA"
    elif ratio >= MIN_CONTRAST_RATIO:
        level = "AA"
    else:
        level = "fail"
    return ContrastCheck(
        meets=ratio >= MIN_CONTRAST_RATIO,
        ratio=round(ratio, 2),
        level=level,
    )
