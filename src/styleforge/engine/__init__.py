from __future__ import annotations

from styleforge.engine.errors import UnknownFieldError
from styleforge.engine.merge import deep_merge, state_from_dict
from styleforge.engine.resolver import (
    BreakpointOverrides,
    active_breakpoints,
    empty_overrides,
    resolve,
)
from styleforge.engine.session import EditingSession

__all__ = [
    "BreakpointOverrides",
    "EditingSession",
    "UnknownFieldError",
    "active_breakpoints",
    "deep_merge",
    "empty_overrides",
    "resolve",
    "state_from_dict",
]
