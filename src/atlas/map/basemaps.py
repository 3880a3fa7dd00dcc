"""Base tile providers offered by the map view."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from atlas.errors import UnknownBasemap


@dataclass(frozen=True)
class Basemap:
    name: str
    url: str
    attribution: str


BASEMAPS: MappingProxyType[str, Basemap] = MappingProxyType({
    "OSM": Basemap(
        "OSM",
        "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
        '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors',
    ),
    "Topo": Basemap(
        "Topo",
        "https://{s}.tile.opentopomap.org/{z}/{x}/{y}.png",
        'Map data &copy; OpenStreetMap contributors, SRTM | Style &copy; '
        '<a href="https://opentopomap.org">OpenTopoMap</a>',
    ),
    "Imagery": Basemap(
        "Imagery",
        "https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}",
        "Tiles &copy; Esri",
    ),
})

DEFAULT_BASEMAP = "OSM"


def get_basemap(name: str) -> Basemap:
    try:
        return BASEMAPS[name]
    except KeyError:
        raise UnknownBasemap(name) from None
