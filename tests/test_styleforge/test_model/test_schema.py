"""Tests for leaf kinds and value coercion."""
from __future__ import annotations

import pytest

from styleforge.model.enums import BlendMode, FontWeight
from styleforge.model.schema import (
    CLASSES,
    COLOR,
    DEEP_FIELDS,
    GROUP_FIELDS,
    GROUP_TYPES,
    NUMBER,
    STRING,
    coerce_value,
    leaf_kind,
)


class TestCoerceString:
    def test_string_passes_through(self) -> None:
        assert coerce_value(STRING, "16") == "16"

    def test_number_is_formatted(self) -> None:
        assert coerce_value(STRING, 16) == "16"
        assert coerce_value(STRING, 1.5) == "1.5"

    def test_rejects_other_types(self) -> None:
        with pytest.raises(ValueError):
            coerce_value(STRING, None)
        with pytest.raises(ValueError):
            coerce_value(STRING, True)


class TestCoerceNumber:
    def test_numbers_pass_through(self) -> None:
        assert coerce_value(NUMBER, 45) == 45
        assert coerce_value(NUMBER, 1.5) == 1.5

    def test_numeric_strings(self) -> None:
        assert coerce_value(NUMBER, "120") == 120
        assert coerce_value(NUMBER, " 2.5 ") == 2.5

    @pytest.mark.parametrize("value", [True, None, "12px", "", float("nan"), "inf", [1]])
    def test_rejects(self, value) -> None:
        with pytest.raises(ValueError):
            coerce_value(NUMBER, value)


class TestCoerceColor:
    def test_none_and_blank(self) -> None:
        assert coerce_value(COLOR, None) is None
        assert coerce_value(COLOR, "  ") is None

    def test_string(self) -> None:
        assert coerce_value(COLOR, " #112233 ") == "#112233"

    def test_rejects_number(self) -> None:
        with pytest.raises(ValueError):
            coerce_value(COLOR, 3)


class TestCoerceClassesAndEnums:
    def test_classes_from_string(self) -> None:
        assert coerce_value(CLASSES, "flex  gap-2") == ("flex", "gap-2")

    def test_classes_from_list(self) -> None:
        assert coerce_value(CLASSES, ["flex", " ", "gap-2"]) == ("flex", "gap-2")

    def test_enum_from_string(self) -> None:
        assert coerce_value(FontWeight, "Bold") is FontWeight.BOLD
        assert coerce_value(BlendMode, "color-dodge") is BlendMode.COLOR_DODGE

    def test_enum_unknown(self) -> None:
        with pytest.raises(ValueError):
            coerce_value(FontWeight, "heavy")


class TestTables:
    def test_every_group_has_a_type(self) -> None:
        assert set(GROUP_FIELDS) == set(GROUP_TYPES)

    def test_border_radius_is_the_only_deep_field(self) -> None:
        assert DEEP_FIELDS == {"border": {"radius": DEEP_FIELDS["border"]["radius"]}}
        assert "radius" not in GROUP_FIELDS["border"]

    def test_leaf_kind(self) -> None:
        assert leaf_kind("tag") == STRING
        assert leaf_kind("effects", "opacity") == NUMBER
        assert leaf_kind("border", "radius", "tl") == NUMBER
        with pytest.raises(KeyError):
            leaf_kind("nope")
