"""Export a Layer back to a GeoJSON FeatureCollection dict.

The result is a plain, mutable copy safe to hand to json.dumps or folium;
the layer itself is never touched.
"""

from __future__ import annotations

from atlas.layers.layer import Feature, Layer


def export_geojson(layer: Layer) -> dict:
    """Export a Layer to a GeoJSON FeatureCollection dict.

    Args:
        layer: The Layer to export.

    Returns:
        Dict representing a GeoJSON FeatureCollection.
    """
    features = [_feature_to_geojson(feature) for feature in layer.data.features]

    result = {
        "type": "FeatureCollection",
        "features": features,
    }
    if layer.data.name:
        result["name"] = layer.data.name
    return result


def _feature_to_geojson(feature: Feature) -> dict:
    """Convert a Feature to a GeoJSON Feature dict."""
    gj = {
        "type": "Feature",
        "geometry": dict(feature.geometry) if feature.geometry is not None else None,
        "properties": dict(feature.properties),
    }
    if feature.feature_id is not None:
        gj["id"] = feature.feature_id
    return gj
