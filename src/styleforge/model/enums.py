from __future__ import annotations

from enum import StrEnum


class Breakpoint(StrEnum):
    BASE = "base"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "2xl"


BREAKPOINT_ORDER: tuple[Breakpoint, ...] = tuple(Breakpoint)


class PositionType(StrEnum):
    STATIC = "static"
    RELATIVE = "relative"
    ABSOLUTE = "absolute"
    FIXED = "fixed"
    STICKY = "sticky"


class FontFamily(StrEnum):
    INTER = "inter"
    ROBOTO = "roboto"
    POPPINS = "poppins"
    MONTSERRAT = "montserrat"
    MONO = "mono"
    SERIF = "serif"
    SANS = "sans"


class FontWeight(StrEnum):
    THIN = "thin"
    EXTRALIGHT = "extralight"
    LIGHT = "light"
    NORMAL = "normal"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    EXTRABOLD = "extrabold"
    BLACK = "black"


class LetterSpacing(StrEnum):
    TIGHTER = "tighter"
    TIGHT = "tight"
    NORMAL = "normal"
    WIDE = "wide"
    WIDER = "wider"
    WIDEST = "widest"


class TextAlign(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class BorderStyle(StrEnum):
    NONE = "none"
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"


class Shadow(StrEnum):
    NONE = "none"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "2xl"
    INNER = "inner"


class BlendMode(StrEnum):
    NORMAL = "normal"
    MULTIPLY = "multiply"
    SCREEN = "screen"
    OVERLAY = "overlay"
    DARKEN = "darken"
    LIGHTEN = "lighten"
    COLOR_DODGE = "color-dodge"
    COLOR_BURN = "color-burn"
    DIFFERENCE = "difference"
    EXCLUSION = "exclusion"
