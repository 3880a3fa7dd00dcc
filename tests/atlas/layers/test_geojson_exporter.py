"""Tests for GeoJSON export — FeatureCollection structure and copy semantics."""

import json

import pytest

from atlas.layers import Feature, FeatureCollection, Layer
from atlas.layers.exporters.geojson import export_geojson
from atlas.layers.parsers.geojson import parse_geojson


@pytest.fixture
def layer():
    return Layer(
        layer_id="claims-1",
        name="claims",
        data=FeatureCollection(
            features=(
                Feature({"type": "Point", "coordinates": [77.9, 23.4]}, {"status": "Pending"}, "MP-001"),
                Feature(None, {"status": "Claimed"}),
            ),
        ),
    )


@pytest.mark.unit
class TestGeoJSONExporter:

    def test_feature_collection_type(self, layer):
        gj = export_geojson(layer)
        assert gj["type"] == "FeatureCollection"
        assert len(gj["features"]) == 2

    def test_feature_id_only_when_set(self, layer):
        gj = export_geojson(layer)
        assert gj["features"][0]["id"] == "MP-001"
        assert "id" not in gj["features"][1]

    def test_json_serializable(self, layer):
        text = json.dumps(export_geojson(layer))
        assert "Pending" in text

    def test_export_is_a_copy(self, layer):
        gj = export_geojson(layer)
        gj["features"][0]["properties"]["status"] = "Rejected"
        assert layer.data.features[0].properties["status"] == "Pending"

    def test_parse_then_export_matches_document(self):
        doc = {
            "type": "FeatureCollection",
            "features": [
                {
                    "type": "Feature",
                    "id": 3,
                    "geometry": {"type": "Point", "coordinates": [1.0, 2.0]},
                    "properties": {"land_use": "Forest"},
                },
            ],
        }
        layer = Layer("x", "x", parse_geojson(json.dumps(doc)))
        assert export_geojson(layer) == doc
