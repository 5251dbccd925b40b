"""Breakpoint resolution: base state plus a breakpoint's sparse overrides."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from styleforge.engine.merge import deep_merge
from styleforge.model.enums import BREAKPOINT_ORDER, Breakpoint
from styleforge.model.state import StyleState
from styleforge.model.wire import normalize_patch

BreakpointOverrides = Mapping[Breakpoint, Mapping[str, Any]]

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def empty_overrides() -> dict[Breakpoint, Mapping[str, Any]]:
    """Return an override mapping with an empty record for every breakpoint."""
    return {bp: _EMPTY for bp in BREAKPOINT_ORDER}


def resolve(base: StyleState, overrides: BreakpointOverrides, bp: Breakpoint | str) -> StyleState:
    """Return the effective state for *bp*.

    Scalar fields in the override replace the base value, nested groups
    merge one level deep and ``border.radius`` merges its own keys. Fields
    absent from the override keep the base value. Records may use wire or
    snake_case keys; unknown keys and bad values are dropped.
    """
    bp = Breakpoint(bp)
    if bp is Breakpoint.BASE:
        return base
    record = overrides.get(bp)
    if not record:
        return base
    return deep_merge(base, normalize_patch(record))


def active_breakpoints(overrides: BreakpointOverrides) -> list[Breakpoint]:
    """Return ``base`` plus every breakpoint with a non-empty override record."""
    return [
        bp for bp in BREAKPOINT_ORDER
        if bp is Breakpoint.BASE or overrides.get(bp)
    ]
