"""Layer, FeatureCollection and Feature dataclasses for uploaded overlays.

All three are frozen: replacing a layer's data means adding a new Layer
and removing the old one. Coordinates stay in GeoJSON convention
([lng, lat]) and geometry is carried through unvalidated; drawing it is
the renderer's problem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Union

# Loosely typed GeoJSON property value. Lookups in atlas.rules dispatch on
# the runtime type rather than assuming strings.
PropertyValue = Union[str, int, float, bool, None, list, dict]


@dataclass(frozen=True)
class Feature:
    """A single GeoJSON feature.

    Attributes:
        geometry: Raw GeoJSON geometry object, or None for null geometry.
        properties: Read-only mapping of property name to value.
        feature_id: The feature-level ``id`` member, if the document had one.
    """

    geometry: Mapping[str, Any] | None = None
    properties: Mapping[str, PropertyValue] = field(default_factory=dict)
    feature_id: PropertyValue = None

    def __post_init__(self) -> None:
        if not isinstance(self.properties, MappingProxyType):
            object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))
        if self.geometry is not None and not isinstance(self.geometry, MappingProxyType):
            object.__setattr__(self, "geometry", MappingProxyType(dict(self.geometry)))


@dataclass(frozen=True)
class FeatureCollection:
    """An ordered, immutable sequence of features."""

    features: tuple[Feature, ...] = ()
    name: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.features, tuple):
            object.__setattr__(self, "features", tuple(self.features))

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self):
        return iter(self.features)


@dataclass(frozen=True)
class Layer:
    """A named, colored wrapper around one uploaded feature collection.

    Attributes:
        layer_id: Unique within the owning store's lifetime.
        name: Display label (upload filename without ``.geojson``).
        data: The parsed feature collection.
        color: CSS color string drawn from the fixed palette.
        source_name: Original upload filename.
        created_at: ISO8601 creation timestamp.
    """

    layer_id: str
    name: str
    data: FeatureCollection = field(default_factory=FeatureCollection)
    color: str = "#2563eb"
    source_name: str = ""
    created_at: str = ""

    @property
    def feature_count(self) -> int:
        return len(self.data)
