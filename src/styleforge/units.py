"""CSS value normalization for user-entered numeric and length values."""

from __future__ import annotations

import math
import re

__all__ = [
    "CSS_UNITS",
    "DEFAULT_KEYWORDS",
    "SIZE_KEYWORDS",
    "format_number",
    "is_zero",
    "normalize",
]

CSS_UNITS: tuple[str, ...] = ("px", "rem", "em", "%", "vh", "vw", "vmin", "vmax", "ch", "ex")

DEFAULT_KEYWORDS: tuple[str, ...] = ("auto", "inherit", "initial", "unset")

SIZE_KEYWORDS: tuple[str, ...] = DEFAULT_KEYWORDS + ("fit-content", "max-content", "min-content")

# Leading numeric token: optional sign, then digits and dots.
_LEADING_NUMBER_RE = re.compile(r"^(-?[\d.]+)")

# The longest prefix of a numeric token that parses as a float.
_FLOAT_PREFIX_RE = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)")


def format_number(value: float | int) -> str:
    """Format a number the way a browser prints it in CSS.

    Integral values drop their fractional part (``1.0`` -> ``"1"``).
    """
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return ""
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def _parse_leading_float(token: str) -> float | None:
    match = _FLOAT_PREFIX_RE.match(token)
    if match is None:
        return None
    return float(match.group(0))


def normalize(
    raw: str | float | int | None,
    default_unit: str = "px",
    allowed_keywords: tuple[str, ...] | list[str] = DEFAULT_KEYWORDS,
) -> str:
    """Convert a raw value into a CSS value string.

    Empty input yields ``""``. Keywords and values that already carry a CSS
    unit pass through lower-cased. A bare number gets *default_unit*
    appended. Input with no leading number is returned unchanged.
    """
    if raw is None:
        return ""
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        text = format_number(raw)
        if not text:
            return ""
    else:
        text = str(raw)

    text = text.strip().lower()
    if not text:
        return ""

    if text in allowed_keywords:
        return text

    if text.endswith(CSS_UNITS):
        return text

    match = _LEADING_NUMBER_RE.match(text)
    if match is None:
        return text

    number = _parse_leading_float(match.group(1))
    if number is None:
        return ""

    return f"{format_number(number)}{default_unit}"


def is_zero(raw: str | float | int | None) -> bool:
    """Return True when a spacing value is unset or zero."""
    if raw is None:
        return True
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return raw == 0
    text = str(raw).strip()
    return text in ("", "0")
