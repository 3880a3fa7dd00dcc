"""Uploaded overlay layers — GeoJSON parsing, export, and the layer store."""

from atlas.layers.layer import Feature, FeatureCollection, Layer, PropertyValue
from atlas.layers.store import LayerStore

__all__ = ["Feature", "FeatureCollection", "Layer", "LayerStore", "PropertyValue"]
