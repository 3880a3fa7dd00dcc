"""Generic lookups over loosely typed feature properties.

Feature properties are arbitrary JSON values. Everything here dispatches
on the value's runtime type, so a category or identifier may be a
string, number, boolean, or nested structure.
"""

from __future__ import annotations

import json
from typing import Mapping

from atlas.layers.layer import Feature, PropertyValue

CATEGORY_KEYS = ("land_use", "landuse", "landUse", "category", "class")
IDENTIFIER_KEYS = ("id", "claim_id", "gid")
UNKNOWN_CATEGORY = "Unknown"


class _Missing:
    """Sentinel for a property name absent on one side of a comparison."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def first_present(props: Mapping[str, PropertyValue], keys: tuple[str, ...]) -> PropertyValue:
    """Value of the first key that is present and not null, else None."""
    for key in keys:
        value = props.get(key)
        if value is not None:
            return value
    return None


def render_value(value: PropertyValue | _Missing) -> str:
    """Stringify a property value for comparison and display.

    Absent -> ``(absent)``; null -> ``null``; booleans -> ``true``/``false``;
    integral floats drop their ``.0`` (``2.0`` -> ``2``); lists and dicts ->
    compact JSON with their original key order.
    """
    if value is MISSING:
        return "(absent)"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def values_equal(a: PropertyValue | _Missing, b: PropertyValue | _Missing) -> bool:
    """Exact value equality across JSON types.

    Booleans never equal numbers and strings never equal numbers; ints and
    floats compare numerically. Nested values compare by rendering, so the
    same object with a different key order counts as different.
    """
    if a is MISSING or b is MISSING:
        return a is b
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    if isinstance(a, (list, dict)) or isinstance(b, (list, dict)):
        return type(a) is type(b) and render_value(a) == render_value(b)
    return type(a) is type(b) and a == b


def resolve_category(feature: Feature) -> str:
    """Land-use category of a feature, ``Unknown`` when blank or missing."""
    value = first_present(feature.properties, CATEGORY_KEYS)
    if value is None:
        return UNKNOWN_CATEGORY
    return render_value(value).strip() or UNKNOWN_CATEGORY


def resolve_identifier(feature: Feature) -> str | None:
    """Identifier used to match a feature across layers.

    Checks the feature-level id, then ``id``, ``claim_id`` and ``gid``
    properties. Returns None when none of them is set.
    """
    if feature.feature_id is not None:
        return render_value(feature.feature_id)
    value = first_present(feature.properties, IDENTIFIER_KEYS)
    if value is None:
        return None
    return render_value(value)
