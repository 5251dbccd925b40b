"""Tests for the StyleState records and defaults."""
from __future__ import annotations

import dataclasses

import pytest

from styleforge.model import (
    ALLOWED_TAGS,
    DEFAULT_STATE,
    NULLABLE_FIELDS,
    BREAKPOINT_ORDER,
    Breakpoint,
    BorderRadius,
    FontWeight,
    PositionType,
    Shadow,
    StyleState,
)


class TestDefaults:
    def test_identity_defaults(self) -> None:
        state = StyleState()
        assert state.tag == "div"
        assert state.transforms.scale == 100
        assert state.effects.opacity == 100
        assert state.effects.saturation == 100
        assert state.effects.brightness == 100
        assert state.effects.contrast == 100
        assert state.border.radius == BorderRadius()
        assert state.position.type == PositionType.RELATIVE
        assert state.typography.font_weight == FontWeight.NORMAL
        assert state.effects.shadow == Shadow.NONE

    def test_nullable_colours_default_to_none(self) -> None:
        for group, leaf in NULLABLE_FIELDS:
            assert getattr(getattr(DEFAULT_STATE, group), leaf) is None

    def test_default_state_equals_fresh_state(self) -> None:
        assert DEFAULT_STATE == StyleState()

    def test_tailwind_classes_is_tuple(self) -> None:
        assert DEFAULT_STATE.tailwind_classes == ()


class TestImmutability:
    def test_state_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_STATE.tag = "span"  # type: ignore[misc]

    def test_group_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_STATE.padding.l = "4"  # type: ignore[misc]


class TestBreakpoints:
    def test_order(self) -> None:
        assert [str(bp) for bp in BREAKPOINT_ORDER] == ["base", "sm", "md", "lg", "xl", "2xl"]

    def test_lookup_by_value(self) -> None:
        assert Breakpoint("2xl") is Breakpoint.XXL

    def test_unknown_breakpoint(self) -> None:
        with pytest.raises(ValueError):
            Breakpoint("xxl")


def test_allowed_tags_include_common_elements() -> None:
    for tag in ("div", "a", "button", "section", "h1"):
        assert tag in ALLOWED_TAGS
    assert "script" not in ALLOWED_TAGS
