"""Tests for deep merge of normalized patches."""
from __future__ import annotations

from dataclasses import replace

from styleforge.engine.merge import GROUP_MERGERS, deep_merge, merge_border, merge_flat, state_from_dict
from styleforge.model import DEFAULT_STATE, BorderRadius, Shadow, StyleState
from styleforge.model.schema import GROUP_FIELDS


def test_every_group_has_a_merger() -> None:
    assert set(GROUP_MERGERS) == set(GROUP_FIELDS)


class TestMergeFlat:
    def test_replaces_only_changed_keys(self) -> None:
        merged = merge_flat(DEFAULT_STATE.padding, {"l": "4"})
        assert merged.l == "4"
        assert merged.t == "0"

    def test_no_change_returns_same_object(self) -> None:
        padding = DEFAULT_STATE.padding
        assert merge_flat(padding, {"l": "0"}) is padding
        assert merge_flat(padding, {}) is padding
        assert merge_flat(padding, None) is padding


class TestMergeBorder:
    def test_radius_merges_one_level_deeper(self) -> None:
        border = replace(DEFAULT_STATE.border, radius=BorderRadius(all=8, tl=8))
        merged = merge_border(border, {"radius": {"tl": 16}})
        assert merged.radius == BorderRadius(all=8, tl=16)

    def test_flat_keys_keep_radius_identity(self) -> None:
        border = DEFAULT_STATE.border
        merged = merge_border(border, {"width": "2"})
        assert merged.width == "2"
        assert merged.radius is border.radius

    def test_radius_record_replaces(self) -> None:
        merged = merge_border(DEFAULT_STATE.border, {"radius": BorderRadius(all=4)})
        assert merged.radius == BorderRadius(all=4)


class TestDeepMerge:
    def test_nested_merge_keeps_siblings(self) -> None:
        state = deep_merge(DEFAULT_STATE, {"effects": {"shadow": Shadow.LG}})
        assert state.effects.shadow == Shadow.LG
        assert state.effects.opacity == 100

    def test_untouched_groups_keep_identity(self) -> None:
        state = deep_merge(DEFAULT_STATE, {"typography": {"text_color": "#fff"}})
        assert state.padding is DEFAULT_STATE.padding
        assert state.border is DEFAULT_STATE.border
        assert state.typography is not DEFAULT_STATE.typography

    def test_noop_patch_returns_same_state(self) -> None:
        assert deep_merge(DEFAULT_STATE, {}) is DEFAULT_STATE
        assert deep_merge(DEFAULT_STATE, {"tag": "div"}) is DEFAULT_STATE
        assert deep_merge(DEFAULT_STATE, {"padding": None}) is DEFAULT_STATE

    def test_tuples_replace(self) -> None:
        state = replace(DEFAULT_STATE, tailwind_classes=("a", "b"))
        merged = deep_merge(state, {"tailwind_classes": ("c",)})
        assert merged.tailwind_classes == ("c",)

    def test_nested_null_clears_colour(self) -> None:
        state = deep_merge(DEFAULT_STATE, {"appearance": {"background_color": "#000"}})
        cleared = deep_merge(state, {"appearance": {"background_color": None}})
        assert cleared.appearance.background_color is None

    def test_idempotent(self) -> None:
        patch = {"padding": {"l": "16"}, "border": {"radius": {"all": 8}}}
        once = deep_merge(DEFAULT_STATE, patch)
        twice = deep_merge(once, patch)
        assert twice is once


class TestStateFromDict:
    def test_round_trip_from_wire(self) -> None:
        state = state_from_dict({
            "tag": "a",
            "textContent": "Go",
            "transforms3D": {"rotateX": 30},
            "inlineCSS": "cursor: pointer",
            "tailwindClasses": ["flex"],
        })
        assert isinstance(state, StyleState)
        assert state.tag == "a"
        assert state.text_content == "Go"
        assert state.transforms_3d.rotate_x == 30
        assert state.inline_css == "cursor: pointer"
        assert state.tailwind_classes == ("flex",)

    def test_empty_dict_is_default(self) -> None:
        assert state_from_dict({}) is DEFAULT_STATE
