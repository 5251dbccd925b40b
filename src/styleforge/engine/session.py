"""Editing session: canonical state, per-breakpoint overrides and the
currently selected breakpoint.

A session is immutable. Every mutation returns a new session and copies
only the records along the modified path, so untouched sub-records and
untouched breakpoint records keep their identity.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

from styleforge.engine.errors import UnknownFieldError
from styleforge.engine.merge import deep_merge, state_from_dict
from styleforge.engine.resolver import (
    BreakpointOverrides,
    active_breakpoints,
    empty_overrides,
    resolve,
)
from styleforge.model.enums import Breakpoint
from styleforge.model.schema import (
    DEEP_FIELDS,
    GROUP_FIELDS,
    GROUP_TYPES,
    SCALAR_FIELDS,
    coerce_value,
)
from styleforge.model.state import DEFAULT_STATE, StyleState
from styleforge.model.wire import group_to_dict, normalize_patch, patch_to_wire, state_to_dict

if TYPE_CHECKING:
    from styleforge.ai.styler import StylerResult
    from styleforge.catalog.templates import Template

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditingSession:
    state: StyleState = DEFAULT_STATE
    overrides: BreakpointOverrides = field(default_factory=empty_overrides)
    breakpoint: Breakpoint = Breakpoint.BASE

    # --- reads ----------------------------------------------------------------

    def effective_state(self, bp: Breakpoint | str | None = None) -> StyleState:
        """Resolve the state for *bp* (defaults to the current breakpoint)."""
        return resolve(self.state, self.overrides, bp or self.breakpoint)

    def has_breakpoint_overrides(self, bp: Breakpoint | str) -> bool:
        return bool(self.overrides.get(Breakpoint(bp)))

    def active_breakpoints(self) -> list[Breakpoint]:
        return active_breakpoints(self.overrides)

    # --- routing helpers ------------------------------------------------------

    def _target(self, bp: Breakpoint | str | None) -> Breakpoint:
        return Breakpoint(bp) if bp is not None else self.breakpoint

    def _with_state(self, state: StyleState) -> EditingSession:
        if state is self.state:
            return self
        return replace(self, state=state)

    def _with_record(self, bp: Breakpoint, record: Mapping[str, Any]) -> EditingSession:
        overrides = dict(self.overrides)
        overrides[bp] = record
        return replace(self, overrides=overrides)

    def _record(self, bp: Breakpoint) -> Mapping[str, Any]:
        return self.overrides.get(bp) or {}

    # --- mutations ------------------------------------------------------------

    def set_breakpoint(self, bp: Breakpoint | str) -> EditingSession:
        bp = Breakpoint(bp)
        if bp is self.breakpoint:
            return self
        return replace(self, breakpoint=bp)

    def set_field(
        self,
        key: str,
        value: Any,
        breakpoint: Breakpoint | str | None = None,
    ) -> EditingSession:
        """Write a whole top-level field on the base state or an override."""
        bp = self._target(breakpoint)

        if key in SCALAR_FIELDS:
            coerced = coerce_value(SCALAR_FIELDS[key], value)
        elif key in GROUP_TYPES:
            coerced = self._build_group(key, value)
        else:
            raise UnknownFieldError(key)

        if bp is Breakpoint.BASE:
            if getattr(self.state, key) == coerced:
                return self
            return self._with_state(replace(self.state, **{key: coerced}))

        stored = group_to_dict(coerced) if key in GROUP_TYPES else coerced
        return self._with_record(bp, {**self._record(bp), key: stored})

    def set_nested_field(
        self,
        key: str,
        nested_key: str,
        value: Any,
        breakpoint: Breakpoint | str | None = None,
    ) -> EditingSession:
        """Merge one key into the nested record at *key*."""
        leaves = GROUP_FIELDS.get(key)
        if leaves is None or nested_key not in leaves:
            raise UnknownFieldError(f"{key}.{nested_key}")
        coerced = coerce_value(leaves[nested_key], value)
        bp = self._target(breakpoint)

        if bp is Breakpoint.BASE:
            group = getattr(self.state, key)
            if getattr(group, nested_key) == coerced:
                return self
            new_group = replace(group, **{nested_key: coerced})
            return self._with_state(replace(self.state, **{key: new_group}))

        record = self._record(bp)
        existing = record.get(key)
        nested = dict(existing) if isinstance(existing, Mapping) else {}
        nested[nested_key] = coerced
        return self._with_record(bp, {**record, key: nested})

    def set_deep_nested_field(
        self,
        key: str,
        nested_key: str,
        deep_key: str,
        value: Any,
        breakpoint: Breakpoint | str | None = None,
    ) -> EditingSession:
        """Write one leaf two levels deep (``border.radius.*``)."""
        leaves = DEEP_FIELDS.get(key, {}).get(nested_key)
        if leaves is None or deep_key not in leaves:
            raise UnknownFieldError(f"{key}.{nested_key}.{deep_key}")
        coerced = coerce_value(leaves[deep_key], value)
        bp = self._target(breakpoint)

        if bp is Breakpoint.BASE:
            group = getattr(self.state, key)
            inner = getattr(group, nested_key)
            if getattr(inner, deep_key) == coerced:
                return self
            new_inner = replace(inner, **{deep_key: coerced})
            new_group = replace(group, **{nested_key: new_inner})
            return self._with_state(replace(self.state, **{key: new_group}))

        record = self._record(bp)
        existing = record.get(key)
        nested = dict(existing) if isinstance(existing, Mapping) else {}
        existing_inner = nested.get(nested_key)
        inner = dict(existing_inner) if isinstance(existing_inner, Mapping) else {}
        inner[deep_key] = coerced
        nested[nested_key] = inner
        return self._with_record(bp, {**record, key: nested})

    def apply_patch(self, patch: Mapping[str, Any]) -> EditingSession:
        """Deep-merge a partial state (wire or snake_case keys) into the base state."""
        normalized = normalize_patch(patch)
        logger.debug("Applying patch with keys %s", sorted(normalized))
        return self._with_state(deep_merge(self.state, normalized))

    def apply_ai_result(self, result: StylerResult) -> EditingSession:
        """Merge a successful styling result; failures leave the session untouched."""
        if not result.success or not result.changes:
            return self
        return self.apply_patch(result.changes)

    def apply_template(self, template: Template) -> EditingSession:
        return self.apply_patch(template.state)

    def load_preset(self, state: StyleState) -> EditingSession:
        """Merge a saved preset's full state into the base state."""
        return self._with_state(deep_merge(self.state, group_to_dict(state)))

    def reset_all(self) -> EditingSession:
        return replace(self, state=DEFAULT_STATE, overrides=empty_overrides())

    def reset_transforms(self) -> EditingSession:
        if (
            self.state.transforms == DEFAULT_STATE.transforms
            and self.state.transforms_3d == DEFAULT_STATE.transforms_3d
        ):
            return self
        state = replace(
            self.state,
            transforms=DEFAULT_STATE.transforms,
            transforms_3d=DEFAULT_STATE.transforms_3d,
        )
        return self._with_state(state)

    def reset_effects(self) -> EditingSession:
        if self.state.effects == DEFAULT_STATE.effects:
            return self
        return self._with_state(replace(self.state, effects=DEFAULT_STATE.effects))

    def clear_breakpoint_overrides(self, bp: Breakpoint | str) -> EditingSession:
        bp = Breakpoint(bp)
        if bp is Breakpoint.BASE or not self.overrides.get(bp):
            return self
        return self._with_record(bp, empty_overrides()[bp])

    # --- wire form ------------------------------------------------------------

    @classmethod
    def from_dict(
        cls,
        state: Mapping[str, Any] | None = None,
        overrides: Mapping[str, Any] | None = None,
        breakpoint: Breakpoint | str = Breakpoint.BASE,
    ) -> EditingSession:
        """Build a session from JSON: a camelCase state, overrides keyed by
        breakpoint name and the selected breakpoint.

        Raises ValueError for an unknown breakpoint name.
        """
        records = empty_overrides()
        for name, record in (overrides or {}).items():
            bp = Breakpoint(name)
            if bp is Breakpoint.BASE or not isinstance(record, Mapping):
                continue
            patch = normalize_patch(record)
            if patch:
                records[bp] = MappingProxyType(patch)
        return cls(
            state=state_from_dict(state or {}),
            overrides=records,
            breakpoint=Breakpoint(breakpoint),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "state": state_to_dict(self.state),
            "overrides": {
                str(bp): patch_to_wire(record)
                for bp, record in self.overrides.items()
                if record
            },
            "breakpoint": str(self.breakpoint),
        }

    # --- internals ------------------------------------------------------------

    @staticmethod
    def _build_group(key: str, value: Any) -> Any:
        group_type = GROUP_TYPES[key]
        if isinstance(value, group_type):
            return value
        if not isinstance(value, Mapping):
            raise ValueError(f"expected a {group_type.__name__} or mapping for {key}, got {value!r}")
        normalized = normalize_patch({key: value}).get(key, {})
        return getattr(deep_merge(DEFAULT_STATE, {key: normalized}), key)

