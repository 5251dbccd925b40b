"""HTML and CSS export of an effective StyleState."""

from __future__ import annotations

import html
from typing import TYPE_CHECKING, Any

from styleforge.generators.classes import generate_all_classes, generate_classes
from styleforge.generators.styles import generate_styles, style_attribute
from styleforge.generators.values import (
    build_border_radius,
    build_filters,
    build_margin,
    build_padding,
    build_transforms,
    validate_tag,
)
from styleforge.model.enums import (
    BlendMode,
    FontFamily,
    FontWeight,
    LetterSpacing,
    PositionType,
    Shadow,
    TextAlign,
)
from styleforge.model.element import element_data
from styleforge.model.state import StyleState
from styleforge.units import SIZE_KEYWORDS, format_number, is_zero, normalize

if TYPE_CHECKING:
    from styleforge.engine.session import EditingSession

__all__ = ["PLACEHOLDER_SELECTOR", "SHADOW_VALUES", "export_bundle", "to_css", "to_html"]

PLACEHOLDER_SELECTOR = ".element"

LINK_TAGS = ("a", "button")

FONT_WEIGHTS: dict[FontWeight, int] = {
    FontWeight.THIN: 100,
    FontWeight.EXTRALIGHT: 200,
    FontWeight.LIGHT: 300,
    FontWeight.NORMAL: 400,
    FontWeight.MEDIUM: 500,
    FontWeight.SEMIBOLD: 600,
    FontWeight.BOLD: 700,
    FontWeight.EXTRABOLD: 800,
    FontWeight.BLACK: 900,
}

FONT_STACKS: dict[FontFamily, str] = {
    FontFamily.INTER: "'Inter', sans-serif",
    FontFamily.ROBOTO: "'Roboto', sans-serif",
    FontFamily.POPPINS: "'Poppins', sans-serif",
    FontFamily.MONTSERRAT: "'Montserrat', sans-serif",
    FontFamily.MONO: "ui-monospace, SFMono-Regular, Menlo, monospace",
    FontFamily.SERIF: "ui-serif, Georgia, serif",
    FontFamily.SANS: "ui-sans-serif, system-ui, sans-serif",
}

LETTER_SPACINGS: dict[LetterSpacing, str] = {
    LetterSpacing.TIGHTER: "-0.05em",
    LetterSpacing.TIGHT: "-0.025em",
    LetterSpacing.NORMAL: "0em",
    LetterSpacing.WIDE: "0.025em",
    LetterSpacing.WIDER: "0.05em",
    LetterSpacing.WIDEST: "0.1em",
}

FONT_SIZES: dict[str, str] = {
    "xs": "0.75rem",
    "sm": "0.875rem",
    "base": "1rem",
    "lg": "1.125rem",
    "xl": "1.25rem",
    "2xl": "1.5rem",
    "3xl": "1.875rem",
    "4xl": "2.25rem",
    "5xl": "3rem",
    "6xl": "3.75rem",
}

LINE_HEIGHTS: dict[str, str] = {
    "none": "1",
    "tight": "1.25",
    "snug": "1.375",
    "normal": "1.5",
    "relaxed": "1.625",
    "loose": "2",
}

SHADOW_VALUES: dict[Shadow, str] = {
    Shadow.SM: "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    Shadow.MD: "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    Shadow.LG: "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    Shadow.XL: "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
    Shadow.XXL: "0 25px 50px -12px rgb(0 0 0 / 0.25)",
    Shadow.INNER: "inset 0 2px 4px 0 rgb(0 0 0 / 0.05)",
}


def to_html(state: StyleState, classes: str, styles: dict[str, str]) -> str:
    """Render the element as an HTML fragment.

    Attributes with empty sources are omitted; ``href`` is only emitted for
    ``a`` and ``button`` elements with a link.
    """
    tag = validate_tag(state.tag)
    attrs: list[str] = []
    if state.element_id:
        attrs.append(f' id="{html.escape(state.element_id)}"')
    if classes:
        attrs.append(f' class="{html.escape(classes)}"')
    style = style_attribute(styles)
    if style:
        attrs.append(f' style="{html.escape(style)}"')
    if state.link and tag in LINK_TAGS:
        attrs.append(f' href="{html.escape(state.link)}"')
    text = html.escape(state.text_content, quote=False)
    return f"<{tag}{''.join(attrs)}>\n  {text}\n</{tag}>"


def _position_lines(state: StyleState) -> list[str]:
    position = state.position
    lines: list[str] = []
    if position.type != PositionType.STATIC:
        lines.append(f"position: {position.type};")
    for prop, value in (("left", position.l), ("top", position.t), ("right", position.r), ("bottom", position.b)):
        if value:
            lines.append(f"{prop}: {normalize(value, 'px')};")
    if position.z_index:
        lines.append(f"z-index: {position.z_index};")
    return lines


def _size_lines(state: StyleState) -> list[str]:
    size = state.size
    pairs = (
        ("width", size.width),
        ("height", size.height),
        ("max-width", size.max_width),
        ("max-height", size.max_height),
        ("min-width", size.min_width),
        ("min-height", size.min_height),
    )
    return [
        f"{prop}: {normalize(value, 'px', SIZE_KEYWORDS)};"
        for prop, value in pairs
        if value
    ]


def _typography_lines(state: StyleState) -> list[str]:
    typo = state.typography
    lines: list[str] = []
    if typo.font_family != FontFamily.INTER:
        lines.append(f"font-family: {FONT_STACKS[typo.font_family]};")
    if typo.font_size:
        size = FONT_SIZES.get(typo.font_size) or normalize(typo.font_size, "px")
        lines.append(f"font-size: {size};")
    if typo.font_weight != FontWeight.NORMAL:
        lines.append(f"font-weight: {FONT_WEIGHTS[typo.font_weight]};")
    if typo.line_height:
        lines.append(f"line-height: {LINE_HEIGHTS.get(typo.line_height, typo.line_height)};")
    if typo.letter_spacing != LetterSpacing.NORMAL:
        lines.append(f"letter-spacing: {LETTER_SPACINGS[typo.letter_spacing]};")
    if typo.text_color:
        lines.append(f"color: {typo.text_color};")
    if typo.text_align != TextAlign.LEFT:
        lines.append(f"text-align: {typo.text_align};")
    return lines


def _background_lines(state: StyleState) -> list[str]:
    appearance = state.appearance
    lines: list[str] = []
    if appearance.background_color:
        lines.append(f"background-color: {appearance.background_color};")
    if appearance.background_image:
        lines.append(f"background-image: url({appearance.background_image});")
    if appearance.blend_mode != BlendMode.NORMAL:
        lines.append(f"mix-blend-mode: {appearance.blend_mode};")
    return lines


def _border_lines(state: StyleState) -> list[str]:
    border = state.border
    lines: list[str] = []
    radius = build_border_radius(state)
    if radius:
        lines.append(f"border-radius: {radius};")
    if not is_zero(border.width):
        width = normalize(border.width, "px") or "1px"
        if border.color:
            lines.append(f"border: {width} {border.style} {border.color};")
        else:
            lines.append(f"border-width: {width};")
            lines.append(f"border-style: {border.style};")
    elif border.color:
        lines.append(f"border-color: {border.color};")
    return lines


def _transform_lines(state: StyleState) -> list[str]:
    lines: list[str] = []
    transform = build_transforms(state)
    if transform:
        lines.append(f"transform: {transform};")
    perspective = state.transforms_3d.perspective
    if perspective > 0:
        lines.append(f"perspective: {format_number(perspective * 100)}px;")
    return lines


def _effect_lines(state: StyleState, resolve_shadow: bool) -> list[str]:
    fx = state.effects
    lines: list[str] = []
    filters = build_filters(state)
    if filters:
        lines.append(f"filter: {filters};")
    if fx.backdrop_blur > 0:
        lines.append(f"backdrop-filter: blur({format_number(fx.backdrop_blur)}px);")
    if fx.opacity != 100:
        lines.append(f"opacity: {format_number(fx.opacity / 100)};")
    if fx.shadow != Shadow.NONE:
        if resolve_shadow:
            lines.append(f"box-shadow: {SHADOW_VALUES[fx.shadow]};")
        else:
            lines.append(f"/* shadow-{fx.shadow} */")
    return lines


def to_css(
    state: StyleState,
    selector: str | None = None,
    resolve_shadow: bool = False,
    placeholder: str = PLACEHOLDER_SELECTOR,
) -> str:
    """Render a single CSS rule block for *state*.

    Properties appear in a fixed order and only when non-default. The shadow
    is written as a comment naming the utility unless *resolve_shadow* asks
    for a concrete ``box-shadow``.
    """
    if selector is None:
        selector = f"#{state.element_id}" if state.element_id else placeholder

    body: list[str] = []
    body.extend(_position_lines(state))
    body.extend(_size_lines(state))
    padding = build_padding(state)
    if padding:
        body.append(f"padding: {padding};")
    margin = build_margin(state)
    if margin:
        body.append(f"margin: {margin};")
    body.extend(_typography_lines(state))
    body.extend(_background_lines(state))
    body.extend(_border_lines(state))
    body.extend(_transform_lines(state))
    body.extend(_effect_lines(state, resolve_shadow))

    lines = [f"{selector} {{"]
    lines.extend(f"  {line}" for line in body)
    lines.append("}")
    return "\n".join(lines)


def export_bundle(
    session: EditingSession,
    resolve_shadow: bool = False,
    placeholder: str = PLACEHOLDER_SELECTOR,
) -> dict[str, Any]:
    """Every export artifact for the session's current breakpoint."""
    state = session.effective_state()
    classes = generate_classes(state, session.breakpoint)
    styles = generate_styles(state)
    return {
        "breakpoint": str(session.breakpoint),
        "classes": classes,
        "allClasses": generate_all_classes(session.state, session.overrides),
        "styles": styles,
        "html": to_html(state, classes, styles),
        "css": to_css(state, resolve_shadow=resolve_shadow, placeholder=placeholder),
        "element": element_data(state, classes, styles).to_dict(),
    }
