"""Deep merge of partial patches onto a StyleState.

Patches here are normalized snake_case dicts (see ``normalize_patch``).
Nested records merge key by key; every other value, tuples included,
replaces the existing one outright. Records that the patch leaves alone
are carried over as the same objects.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Mapping

from styleforge.model.schema import DEEP_TYPES, SCALAR_FIELDS
from styleforge.model.state import DEFAULT_STATE, Border, StyleState
from styleforge.model.wire import normalize_patch

__all__ = ["deep_merge", "merge_border", "merge_flat", "state_from_dict"]


def merge_flat(record: Any, changes: Mapping[str, Any] | None) -> Any:
    """Merge leaf *changes* onto a one-level record."""
    if not changes:
        return record
    updates = {k: v for k, v in changes.items() if getattr(record, k) != v}
    if not updates:
        return record
    return replace(record, **updates)


def merge_border(border: Border, changes: Mapping[str, Any] | None) -> Border:
    """Merge *changes* onto a Border, merging ``radius`` one level deeper."""
    if not changes:
        return border
    flat = {k: v for k, v in changes.items() if k != "radius"}
    merged = merge_flat(border, flat)
    radius_changes = changes.get("radius")
    if radius_changes is None:
        return merged
    if isinstance(radius_changes, DEEP_TYPES[("border", "radius")]):
        if radius_changes == merged.radius:
            return merged
        return replace(merged, radius=radius_changes)
    radius = merge_flat(merged.radius, radius_changes)
    if radius is merged.radius:
        return merged
    return replace(merged, radius=radius)


GROUP_MERGERS: dict[str, Callable[[Any, Mapping[str, Any] | None], Any]] = {
    "padding": merge_flat,
    "margin": merge_flat,
    "position": merge_flat,
    "size": merge_flat,
    "typography": merge_flat,
    "transforms": merge_flat,
    "transforms_3d": merge_flat,
    "border": merge_border,
    "effects": merge_flat,
    "appearance": merge_flat,
}


def deep_merge(state: StyleState, patch: Mapping[str, Any]) -> StyleState:
    """Merge a normalized patch onto *state*, returning a new state.

    Returns *state* itself when the patch changes nothing.
    """
    updates: dict[str, Any] = {}
    for key, value in patch.items():
        if value is None:
            continue
        if key in GROUP_MERGERS:
            current = getattr(state, key)
            if isinstance(value, Mapping):
                merged = GROUP_MERGERS[key](current, value)
            else:
                merged = value
            if merged is not current and merged != current:
                updates[key] = merged
        elif key in SCALAR_FIELDS:
            if getattr(state, key) != value:
                updates[key] = value
    if not updates:
        return state
    return replace(state, **updates)


def state_from_dict(data: Mapping[str, Any]) -> StyleState:
    """Build a StyleState from its wire (or snake_case) dict form."""
    return deep_merge(DEFAULT_STATE, normalize_patch(data))
