"""Utility-class generation from an effective StyleState.

Each visual concern maps to exactly one token family, and a token is
emitted only when its field differs from the identity default. Colours
are never expressed as tokens; they travel as inline styles.
"""

from __future__ import annotations

from styleforge.engine.resolver import BreakpointOverrides, active_breakpoints, resolve
from styleforge.model.enums import (
    Breakpoint,
    BorderStyle,
    FontFamily,
    FontWeight,
    LetterSpacing,
    PositionType,
    Shadow,
    TextAlign,
)
from styleforge.model.state import BorderRadius, StyleState
from styleforge.units import format_number, is_zero

__all__ = ["generate_all_classes", "generate_classes", "generated_tokens"]


def _pct(value: float) -> str:
    return format_number(value / 100)


def _spacing_tokens(state: StyleState) -> list[str]:
    tokens: list[str] = []
    padding = state.padding
    for side, value in (("l", padding.l), ("t", padding.t), ("r", padding.r), ("b", padding.b)):
        if not is_zero(value):
            tokens.append(f"p{side}-{value}")
    margin = state.margin
    for axis, value in (("x", margin.x), ("y", margin.y)):
        if not is_zero(value):
            tokens.append(f"m{axis}-{value}")
    return tokens


def _position_tokens(state: StyleState) -> list[str]:
    tokens: list[str] = []
    position = state.position
    if position.type != PositionType.STATIC:
        tokens.append(str(position.type))
    if position.z_index:
        tokens.append(f"z-{position.z_index}")
    for name, value in (("left", position.l), ("top", position.t), ("right", position.r), ("bottom", position.b)):
        if value:
            tokens.append(f"{name}-{value}")
    return tokens


def _size_tokens(state: StyleState) -> list[str]:
    size = state.size
    pairs = (
        ("w", size.width),
        ("h", size.height),
        ("max-w", size.max_width),
        ("max-h", size.max_height),
        ("min-w", size.min_width),
        ("min-h", size.min_height),
    )
    return [f"{prop}-[{value}]" for prop, value in pairs if value]


def _typography_tokens(state: StyleState) -> list[str]:
    tokens: list[str] = []
    typo = state.typography
    if typo.font_family != FontFamily.INTER:
        tokens.append(f"font-{typo.font_family}")
    if typo.font_weight != FontWeight.NORMAL:
        tokens.append(f"font-{typo.font_weight}")
    if typo.font_size:
        tokens.append(f"text-{typo.font_size}")
    if typo.letter_spacing != LetterSpacing.NORMAL:
        tokens.append(f"tracking-{typo.letter_spacing}")
    if typo.line_height:
        tokens.append(f"leading-{typo.line_height}")
    if typo.text_align != TextAlign.LEFT:
        tokens.append(f"text-{typo.text_align}")
    return tokens


def _transform_tokens(state: StyleState) -> list[str]:
    tokens: list[str] = []
    tf = state.transforms
    if tf.rotate != 0:
        tokens.append(f"rotate-[{format_number(tf.rotate)}deg]")
    if tf.scale != 100:
        tokens.append(f"scale-[{_pct(tf.scale)}]")
    if tf.translate_x != 0:
        tokens.append(f"translate-x-[{format_number(tf.translate_x)}px]")
    if tf.translate_y != 0:
        tokens.append(f"translate-y-[{format_number(tf.translate_y)}px]")
    if tf.skew_x != 0:
        tokens.append(f"skew-x-[{format_number(tf.skew_x)}deg]")
    if tf.skew_y != 0:
        tokens.append(f"skew-y-[{format_number(tf.skew_y)}deg]")
    return tokens


def _effect_tokens(state: StyleState) -> list[str]:
    tokens: list[str] = []
    fx = state.effects
    if fx.opacity != 100:
        tokens.append(f"opacity-{format_number(fx.opacity)}")
    if fx.blur > 0:
        tokens.append(f"blur-[{format_number(fx.blur)}px]")
    if fx.backdrop_blur > 0:
        tokens.append(f"backdrop-blur-[{format_number(fx.backdrop_blur)}px]")
    if fx.hue_rotate != 0:
        tokens.append(f"hue-rotate-[{format_number(fx.hue_rotate)}deg]")
    if fx.saturation != 100:
        tokens.append(f"saturate-[{_pct(fx.saturation)}]")
    if fx.brightness != 100:
        tokens.append(f"brightness-[{_pct(fx.brightness)}]")
    if fx.contrast != 100:
        tokens.append(f"contrast-[{_pct(fx.contrast)}]")
    if fx.grayscale > 0:
        tokens.append(f"grayscale-[{_pct(fx.grayscale)}]")
    if fx.invert > 0:
        tokens.append(f"invert-[{_pct(fx.invert)}]")
    if fx.sepia > 0:
        tokens.append(f"sepia-[{_pct(fx.sepia)}]")
    if fx.shadow != Shadow.NONE:
        tokens.append(f"shadow-{fx.shadow}")
    return tokens


def _radius_tokens(radius: BorderRadius) -> list[str]:
    corners = (("tl", radius.tl), ("tr", radius.tr), ("br", radius.br), ("bl", radius.bl))
    if any(value != 0 for _, value in corners):
        return [
            f"rounded-{corner}-[{format_number(value)}px]"
            for corner, value in corners
            if value != 0
        ]
    if radius.all != 0:
        return [f"rounded-[{format_number(radius.all)}px]"]
    return []


def _border_tokens(state: StyleState) -> list[str]:
    border = state.border
    tokens = _radius_tokens(border.radius)
    if not is_zero(border.width):
        tokens.append(f"border-{border.width}")
    if border.style not in (BorderStyle.SOLID, BorderStyle.NONE):
        tokens.append(f"border-{border.style}")
    return tokens


def generated_tokens(state: StyleState) -> list[str]:
    """Return the unprefixed generated tokens, without user-supplied classes."""
    tokens: list[str] = []
    tokens.extend(_spacing_tokens(state))
    tokens.extend(_position_tokens(state))
    tokens.extend(_size_tokens(state))
    tokens.extend(_typography_tokens(state))
    tokens.extend(_transform_tokens(state))
    tokens.extend(_effect_tokens(state))
    tokens.extend(_border_tokens(state))
    return [t for t in tokens if t]


def _prefix(breakpoint: Breakpoint | str) -> str:
    bp = Breakpoint(breakpoint)
    return "" if bp is Breakpoint.BASE else f"{bp}:"


def generate_classes(state: StyleState, breakpoint: Breakpoint | str = Breakpoint.BASE) -> str:
    """Return the space-joined class string for *state* at *breakpoint*.

    Generated tokens carry the ``{breakpoint}:`` prefix (none for base);
    the user's own ``tailwind_classes`` follow verbatim, in order.
    """
    prefix = _prefix(breakpoint)
    tokens = [f"{prefix}{token}" for token in generated_tokens(state)]
    tokens.extend(token for token in state.tailwind_classes if token)
    return " ".join(tokens)


def generate_all_classes(base: StyleState, overrides: BreakpointOverrides) -> str:
    """Return classes for base plus every breakpoint that has overrides.

    Each active breakpoint repeats the full rule set against its effective
    state. User classes follow verbatim: the base ones first, then any a
    breakpoint override adds. Tokens are de-duplicated in first-seen order.
    """
    seen: set[str] = set()
    tokens: list[str] = []
    user_classes: list[str] = []

    def add(token: str, into: list[str]) -> None:
        if token and token not in seen:
            seen.add(token)
            into.append(token)

    for bp in active_breakpoints(overrides):
        effective = resolve(base, overrides, bp)
        prefix = _prefix(bp)
        for token in generated_tokens(effective):
            add(f"{prefix}{token}", tokens)
        user_classes.extend(effective.tailwind_classes)
    for token in user_classes:
        add(token, tokens)
    return " ".join(tokens)
