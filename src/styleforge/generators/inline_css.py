"""Validation and formatting helpers for hand-edited classes and inline CSS."""

from __future__ import annotations

import re

_UTILITY_CLASS_RE = re.compile(r"^[a-zA-Z0-9\-_:\[\]/.%#()]+$")
_CSS_DECLARATION_RE = re.compile(r"^[a-z-]+\s*:\s*.+;?$")
_WHITESPACE_RE = re.compile(r"\s+")
_SEMICOLON_RE = re.compile(r"\s*;\s*")
_COLON_RE = re.compile(r"\s*:\s*")


def split_classes(text: str) -> list[str]:
    """Split a class string on whitespace, dropping empties."""
    return text.split() if text else []


def is_valid_utility_class(token: str) -> bool:
    return bool(token) and _UTILITY_CLASS_RE.match(token) is not None


def invalid_utility_classes(tokens) -> list[str]:
    """Return the tokens that do not look like utility classes, in order."""
    if isinstance(tokens, str):
        tokens = split_classes(tokens)
    return [t for t in tokens if not is_valid_utility_class(t)]


def is_valid_inline_css(text: str) -> bool:
    """True when every ``;``-separated declaration is ``prop: value``.

    Empty input is valid.
    """
    if not text or not text.strip():
        return True
    declarations = [d.strip() for d in text.split(";") if d.strip()]
    return all(_CSS_DECLARATION_RE.match(d) for d in declarations)


def beautify_css(text: str) -> str:
    """One declaration per line, each terminated by ``;``."""
    declarations = [d.strip() for d in text.split(";") if d.strip()]
    if not declarations:
        return ""
    return ";\n".join(declarations) + ";"


def minify_css(text: str) -> str:
    collapsed = _WHITESPACE_RE.sub(" ", text)
    collapsed = _SEMICOLON_RE.sub(";", collapsed)
    collapsed = _COLON_RE.sub(":", collapsed)
    return collapsed.strip()
