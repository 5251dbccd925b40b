"""Style state model: the canonical record describing one element's styling.

Every numeric field carries an identity default (``scale=100``,
``opacity=100``, radius corners ``0``); "unset" means "equal to the
default". Only the colour fields listed in ``NULLABLE_FIELDS`` use ``None``
to mean "no override".
"""

from __future__ import annotations

from dataclasses import dataclass, field

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


@dataclass(frozen=True)
class Padding:
    l: str = "0"
    t: str = "0"
    r: str = "0"
    b: str = "0"


@dataclass(frozen=True)
class Margin:
    x: str = "0"
    y: str = "0"


@dataclass(frozen=True)
class Position:
    type: PositionType = PositionType.RELATIVE
    l: str = ""
    t: str = ""
    r: str = ""
    b: str = ""
    z_index: str = ""


@dataclass(frozen=True)
class Size:
    width: str = ""
    height: str = ""
    max_width: str = ""
    max_height: str = ""
    min_width: str = ""
    min_height: str = ""


@dataclass(frozen=True)
class Typography:
    font_family: FontFamily = FontFamily.INTER
    font_size: str = ""
    font_weight: FontWeight = FontWeight.NORMAL
    line_height: str = ""
    letter_spacing: LetterSpacing = LetterSpacing.NORMAL
    text_align: TextAlign = TextAlign.LEFT
    text_color: str | None = None


@dataclass(frozen=True)
class Transforms:
    """2D transforms. ``scale`` is a percentage where 100 is identity."""

    translate_x: float = 0
    translate_y: float = 0
    rotate: float = 0
    scale: float = 100
    skew_x: float = 0
    skew_y: float = 0


@dataclass(frozen=True)
class Transforms3D:
    """3D rotations in degrees. ``perspective`` 0 means no perspective."""

    rotate_x: float = 0
    rotate_y: float = 0
    rotate_z: float = 0
    perspective: float = 0


@dataclass(frozen=True)
class BorderRadius:
    all: float = 0
    tl: float = 0
    tr: float = 0
    br: float = 0
    bl: float = 0


@dataclass(frozen=True)
class Border:
    color: str | None = None
    width: str = "0"
    style: BorderStyle = BorderStyle.SOLID
    ring_color: str | None = None
    radius: BorderRadius = field(default_factory=BorderRadius)


@dataclass(frozen=True)
class Effects:
    shadow: Shadow = Shadow.NONE
    opacity: float = 100
    blur: float = 0
    backdrop_blur: float = 0
    hue_rotate: float = 0
    saturation: float = 100
    brightness: float = 100
    contrast: float = 100
    grayscale: float = 0
    invert: float = 0
    sepia: float = 0


@dataclass(frozen=True)
class Appearance:
    background_color: str | None = None
    background_image: str = ""
    blend_mode: BlendMode = BlendMode.NORMAL


@dataclass(frozen=True)
class StyleState:
    element_id: str = ""
    tag: str = "div"
    text_content: str = ""
    link: str = ""
    padding: Padding = field(default_factory=Padding)
    margin: Margin = field(default_factory=Margin)
    position: Position = field(default_factory=Position)
    size: Size = field(default_factory=Size)
    typography: Typography = field(default_factory=Typography)
    transforms: Transforms = field(default_factory=Transforms)
    transforms_3d: Transforms3D = field(default_factory=Transforms3D)
    border: Border = field(default_factory=Border)
    effects: Effects = field(default_factory=Effects)
    appearance: Appearance = field(default_factory=Appearance)
    inline_css: str = ""
    tailwind_classes: tuple[str, ...] = ()


DEFAULT_STATE = StyleState()

# Tags accepted at render time; anything else renders as a div.
ALLOWED_TAGS: tuple[str, ...] = (
    "div", "span", "button", "a", "p", "h1", "h2", "h3",
    "h4", "h5", "h6", "section", "article", "aside", "header",
    "footer", "nav", "main", "label", "input",
)

# Tags offered by the element picker.
TAG_OPTIONS: tuple[str, ...] = (
    "div", "span", "p", "h1", "h2", "h3", "h4", "h5", "h6",
    "section", "article", "header", "footer", "nav", "aside", "main", "a", "button",
)

# Fields whose "no override" sentinel is None rather than the default constant.
NULLABLE_FIELDS: frozenset[tuple[str, str]] = frozenset({
    ("typography", "text_color"),
    ("border", "color"),
    ("border", "ring_color"),
    ("appearance", "background_color"),
})
