"""Map presentation — base tiles, focus regions, and layer overlays."""

from atlas.map.basemaps import BASEMAPS, Basemap
from atlas.map.regions import FOCUS_REGIONS, FocusRegion, get_region
from atlas.map.view import MapView, Overlay, ViewState

__all__ = [
    "BASEMAPS",
    "Basemap",
    "FOCUS_REGIONS",
    "FocusRegion",
    "MapView",
    "Overlay",
    "ViewState",
    "get_region",
]
