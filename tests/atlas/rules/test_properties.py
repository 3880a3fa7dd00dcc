"""Tests for property lookups, value rendering and equality."""

import pytest

from atlas.layers import Feature
from atlas.rules.properties import (
    MISSING,
    render_value,
    resolve_category,
    resolve_identifier,
    values_equal,
)


@pytest.mark.unit
class TestResolveCategory:

    @pytest.mark.parametrize("props,expected", [
        ({"land_use": "Forest", "category": "Water"}, "Forest"),
        ({"landuse": "Agri"}, "Agri"),
        ({"landUse": "Scrub"}, "Scrub"),
        ({"category": "Water"}, "Water"),
        ({"class": "Settlement"}, "Settlement"),
        ({}, "Unknown"),
        ({"category": "   "}, "Unknown"),
        ({"category": ""}, "Unknown"),
        ({"category": "  Forest "}, "Forest"),
    ])
    def test_priority_and_trimming(self, props, expected):
        assert resolve_category(Feature(None, props)) == expected

    def test_null_falls_through(self):
        assert resolve_category(Feature(None, {"land_use": None, "class": "Water"})) == "Water"

    def test_blank_first_match_does_not_fall_through(self):
        assert resolve_category(Feature(None, {"land_use": " ", "class": "Water"})) == "Unknown"

    def test_non_string_category(self):
        assert resolve_category(Feature(None, {"class": 3})) == "3"
        assert resolve_category(Feature(None, {"class": True})) == "true"


@pytest.mark.unit
class TestResolveIdentifier:

    def test_feature_id_first(self):
        f = Feature(None, {"id": "P", "claim_id": "C"}, feature_id="F")
        assert resolve_identifier(f) == "F"

    @pytest.mark.parametrize("props,expected", [
        ({"id": "P", "claim_id": "C"}, "P"),
        ({"claim_id": "C", "gid": 9}, "C"),
        ({"gid": 9}, "9"),
        ({"name": "x"}, None),
        ({"id": None}, None),
    ])
    def test_property_fallbacks(self, props, expected):
        assert resolve_identifier(Feature(None, props)) == expected

    def test_numeric_feature_id(self):
        assert resolve_identifier(Feature(None, {}, feature_id=12)) == "12"

    def test_zero_is_an_identifier(self):
        assert resolve_identifier(Feature(None, {"gid": 0})) == "0"


@pytest.mark.unit
class TestRenderValue:

    @pytest.mark.parametrize("value,expected", [
        (MISSING, "(absent)"),
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (1, "1"),
        (2.5, "2.5"),
        (2.0, "2"),
        (-0.0, "0"),
        ("Forest", "Forest"),
        ([1, 2], "[1, 2]"),
        ({"b": 1, "a": 2}, '{"b": 1, "a": 2}'),
    ])
    def test_render(self, value, expected):
        assert render_value(value) == expected


@pytest.mark.unit
class TestValuesEqual:

    def test_same_scalars(self):
        assert values_equal("a", "a")
        assert values_equal(1, 1)
        assert values_equal(None, None)

    def test_int_and_float_are_numbers(self):
        assert values_equal(1, 1.0)

    def test_bool_never_equals_number(self):
        assert not values_equal(True, 1)
        assert not values_equal(0, False)

    def test_string_never_equals_number(self):
        assert not values_equal("1", 1)

    def test_missing_vs_present(self):
        assert not values_equal(MISSING, None)
        assert not values_equal("x", MISSING)
        assert values_equal(MISSING, MISSING)

    def test_nested_by_rendering(self):
        assert values_equal({"a": 1}, {"a": 1})
        assert not values_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})
        assert not values_equal([1], "[1]")
