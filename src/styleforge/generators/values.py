"""CSS value builders shared by the preview renderer and the exporter."""

from __future__ import annotations

from styleforge.model.state import ALLOWED_TAGS, StyleState
from styleforge.units import format_number, is_zero, normalize

DEFAULT_SCALE = 100


def validate_tag(tag: str) -> str:
    """Return *tag* lower-cased if whitelisted, otherwise ``div``."""
    normalized = (tag or "").strip().lower()
    return normalized if normalized in ALLOWED_TAGS else "div"


def build_transforms(state: StyleState) -> str:
    """All non-identity 2D and 3D transform functions in a fixed order."""
    tf = state.transforms
    t3d = state.transforms_3d
    parts: list[str] = []
    if tf.translate_x != 0:
        parts.append(f"translateX({format_number(tf.translate_x)}px)")
    if tf.translate_y != 0:
        parts.append(f"translateY({format_number(tf.translate_y)}px)")
    if tf.rotate != 0:
        parts.append(f"rotate({format_number(tf.rotate)}deg)")
    if tf.scale != DEFAULT_SCALE:
        parts.append(f"scale({format_number(tf.scale / DEFAULT_SCALE)})")
    if tf.skew_x != 0:
        parts.append(f"skewX({format_number(tf.skew_x)}deg)")
    if tf.skew_y != 0:
        parts.append(f"skewY({format_number(tf.skew_y)}deg)")
    if t3d.rotate_x != 0:
        parts.append(f"rotateX({format_number(t3d.rotate_x)}deg)")
    if t3d.rotate_y != 0:
        parts.append(f"rotateY({format_number(t3d.rotate_y)}deg)")
    if t3d.rotate_z != 0:
        parts.append(f"rotateZ({format_number(t3d.rotate_z)}deg)")
    return " ".join(parts)


def build_filters(state: StyleState) -> str:
    """Active filter functions: blur, brightness, saturate, contrast,
    hue-rotate, grayscale, invert, sepia."""
    fx = state.effects
    parts: list[str] = []
    if fx.blur > 0:
        parts.append(f"blur({format_number(fx.blur)}px)")
    if fx.brightness != 100:
        parts.append(f"brightness({format_number(fx.brightness / 100)})")
    if fx.saturation != 100:
        parts.append(f"saturate({format_number(fx.saturation / 100)})")
    if fx.contrast != 100:
        parts.append(f"contrast({format_number(fx.contrast / 100)})")
    if fx.hue_rotate != 0:
        parts.append(f"hue-rotate({format_number(fx.hue_rotate)}deg)")
    if fx.grayscale > 0:
        parts.append(f"grayscale({format_number(fx.grayscale / 100)})")
    if fx.invert > 0:
        parts.append(f"invert({format_number(fx.invert / 100)})")
    if fx.sepia > 0:
        parts.append(f"sepia({format_number(fx.sepia / 100)})")
    return " ".join(parts)


def build_border_radius(state: StyleState) -> str:
    """Resolve ``border-radius``: any non-zero corner wins over ``all``."""
    radius = state.border.radius
    corners = (radius.tl, radius.tr, radius.br, radius.bl)
    if any(c != 0 for c in corners):
        return " ".join(f"{format_number(c)}px" for c in corners)
    if radius.all != 0:
        return f"{format_number(radius.all)}px"
    return ""


def build_border(state: StyleState) -> str:
    """``border`` shorthand, only when both a colour and a width are set."""
    border = state.border
    if not border.color or is_zero(border.width):
        return ""
    width = normalize(border.width, "px") or "1px"
    return f"{width} {border.style} {border.color}"


def build_padding(state: StyleState) -> str:
    """``top right bottom left`` with px applied to bare numbers."""
    p = state.padding
    if all(is_zero(v) for v in (p.t, p.r, p.b, p.l)):
        return ""
    return " ".join(normalize(v, "px") or "0px" for v in (p.t, p.r, p.b, p.l))


def build_margin(state: StyleState) -> str:
    """``y x`` with px applied to bare numbers."""
    m = state.margin
    if is_zero(m.x) and is_zero(m.y):
        return ""
    return f"{normalize(m.y, 'px') or '0px'} {normalize(m.x, 'px') or '0px'}"
