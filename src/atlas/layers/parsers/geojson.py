"""Parse GeoJSON (RFC 7946) FeatureCollection text into a FeatureCollection.

Only JSON well-formedness and the FeatureCollection shape are checked.
Geometry is passed through as-is; a renderer may silently skip shapes it
cannot draw.
"""

from __future__ import annotations

import json

from atlas.errors import MalformedInput
from atlas.layers.layer import Feature, FeatureCollection

# Deepest container nesting accepted inside one feature. A MultiPolygon
# geometry needs five levels; rule output re-serializes property values.
MAX_NESTING_DEPTH = 64


def parse_geojson(geojson_text: str | bytes) -> FeatureCollection:
    """Parse a GeoJSON FeatureCollection document.

    Args:
        geojson_text: Raw document content. Bytes are decoded as UTF-8.

    Returns:
        FeatureCollection with one Feature per entry of ``features``,
        in document order.

    Raises:
        MalformedInput: Content is not JSON, is not a FeatureCollection,
            or nests deeper than MAX_NESTING_DEPTH.
    """
    if isinstance(geojson_text, (bytes, bytearray)):
        try:
            geojson_text = geojson_text.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise MalformedInput(f"Upload is not UTF-8 text: {e}") from e

    try:
        data = json.loads(geojson_text)
    except (json.JSONDecodeError, TypeError) as e:
        raise MalformedInput(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise MalformedInput("Document is nested too deeply") from e

    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        raise MalformedInput("Document is not a GeoJSON FeatureCollection")

    raw_features = data.get("features", [])
    if not isinstance(raw_features, list):
        raise MalformedInput("FeatureCollection 'features' must be an array")

    features = [_parse_feature(raw, idx) for idx, raw in enumerate(raw_features)]

    name = data.get("name", "")
    return FeatureCollection(
        features=tuple(features),
        name=name if isinstance(name, str) else "",
    )


def _parse_feature(raw: object, idx: int) -> Feature:
    """Parse a single GeoJSON Feature dict into a Feature."""
    if not isinstance(raw, dict):
        raise MalformedInput(f"Feature {idx} is not an object")

    geometry = raw.get("geometry")
    if geometry is not None and not isinstance(geometry, dict):
        raise MalformedInput(f"Feature {idx} geometry is not an object")

    properties = raw.get("properties")
    if properties is None:
        properties = {}
    elif not isinstance(properties, dict):
        raise MalformedInput(f"Feature {idx} properties is not an object")

    if _nesting_depth(raw) > MAX_NESTING_DEPTH:
        raise MalformedInput(f"Feature {idx} is nested deeper than {MAX_NESTING_DEPTH} levels")

    return Feature(
        geometry=geometry,
        properties=properties,
        feature_id=raw.get("id"),
    )


def _nesting_depth(value: object) -> int:
    """Deepest list/dict nesting under ``value``, counted without recursion."""
    deepest = 0
    stack = [(value, 1)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, dict):
            children = node.values()
        elif isinstance(node, list):
            children = node
        else:
            continue
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in children)
    return deepest
