"""JSON wire format for style state and partial patches.

The wire form uses camelCase keys (``textContent``, ``transforms3D``,
``inlineCSS``). Inside the package every patch is a snake_case nested dict
whose leaves have already been coerced to the field's type.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Mapping

from styleforge.model.schema import (
    DEEP_FIELDS,
    GROUP_FIELDS,
    SCALAR_FIELDS,
    coerce_value,
)
from styleforge.model.state import StyleState

logger = logging.getLogger(__name__)

__all__ = [
    "from_wire_key",
    "group_to_dict",
    "normalize_patch",
    "patch_to_wire",
    "state_to_dict",
    "to_wire_key",
]

_WIRE_OVERRIDES = {
    "transforms_3d": "transforms3D",
    "inline_css": "inlineCSS",
}


def to_wire_key(name: str) -> str:
    """Convert a snake_case field name to its camelCase wire key."""
    if name in _WIRE_OVERRIDES:
        return _WIRE_OVERRIDES[name]
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _all_field_names() -> set[str]:
    names = set(SCALAR_FIELDS) | set(GROUP_FIELDS)
    for group in GROUP_FIELDS.values():
        names.update(group)
    for deep in DEEP_FIELDS.values():
        names.update(deep)
        for leaves in deep.values():
            names.update(leaves)
    return names


_FROM_WIRE: dict[str, str] = {to_wire_key(name): name for name in _all_field_names()}


def from_wire_key(key: str) -> str:
    """Map a wire key (or an already snake_case key) to its field name."""
    return _FROM_WIRE.get(key, key)


def _normalize_leaves(
    data: Mapping[str, Any],
    table: Mapping[str, Any],
    path: str,
) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for raw_key, value in data.items():
        key = from_wire_key(raw_key)
        if key not in table:
            logger.debug("Dropping unknown patch key %s.%s", path, raw_key)
            continue
        try:
            result[key] = coerce_value(table[key], value)
        except ValueError as exc:
            logger.debug("Dropping patch value %s.%s: %s", path, key, exc)
    return result


def _normalize_group(group: str, data: Any) -> dict[str, Any] | None:
    if not isinstance(data, Mapping):
        if hasattr(data, "__dataclass_fields__"):
            data = group_to_dict(data)
        else:
            logger.debug("Dropping non-object value for group %s", group)
            return None

    leaves = GROUP_FIELDS[group]
    deep = DEEP_FIELDS.get(group, {})
    result: dict[str, Any] = {}
    for raw_key, value in data.items():
        key = from_wire_key(raw_key)
        if key in deep:
            if hasattr(value, "__dataclass_fields__"):
                value = group_to_dict(value)
            if not isinstance(value, Mapping):
                logger.debug("Dropping non-object value for %s.%s", group, key)
                continue
            result[key] = _normalize_leaves(value, deep[key], f"{group}.{key}")
        elif key in leaves:
            try:
                result[key] = coerce_value(leaves[key], value)
            except ValueError as exc:
                logger.debug("Dropping patch value %s.%s: %s", group, key, exc)
        else:
            logger.debug("Dropping unknown patch key %s.%s", group, raw_key)
    return result


def normalize_patch(data: Mapping[str, Any]) -> dict[str, Any]:
    """Turn a wire or snake_case partial state into a coerced snake_case patch.

    Unknown keys and values that cannot be coerced are dropped. Top-level
    ``None`` values are dropped too, matching the merge contract.
    """
    patch: dict[str, Any] = {}
    for raw_key, value in data.items():
        key = from_wire_key(raw_key)
        if value is None:
            continue
        if key in GROUP_FIELDS:
            group = _normalize_group(key, value)
            if group is not None:
                patch[key] = group
        elif key in SCALAR_FIELDS:
            try:
                patch[key] = coerce_value(SCALAR_FIELDS[key], value)
            except ValueError as exc:
                logger.debug("Dropping patch value %s: %s", key, exc)
        else:
            logger.debug("Dropping unknown patch key %s", raw_key)
    return patch


def group_to_dict(obj: Any) -> dict[str, Any]:
    """Convert a state sub-record to a snake_case dict, recursing into records."""
    result: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if hasattr(value, "__dataclass_fields__"):
            value = group_to_dict(value)
        result[f.name] = value
    return result


def _to_wire(value: Any) -> Any:
    if hasattr(value, "__dataclass_fields__"):
        return {to_wire_key(f.name): _to_wire(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, str):
        return str(value)
    return value


def state_to_dict(state: StyleState) -> dict[str, Any]:
    """Serialize a StyleState to its JSON-ready camelCase form."""
    return _to_wire(state)


def patch_to_wire(patch: Mapping[str, Any]) -> dict[str, Any]:
    """Convert a snake_case patch (or override record) to camelCase JSON."""
    result: dict[str, Any] = {}
    for key, value in patch.items():
        if isinstance(value, Mapping):
            value = patch_to_wire(value)
        elif isinstance(value, tuple):
            value = list(value)
        result[to_wire_key(key)] = value
    return result
