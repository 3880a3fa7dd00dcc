"""MapView — base map, focus-region markers, and one overlay per layer.

The view keeps its own overlay registry keyed by layer id. ``sync`` is
called with each store snapshot; only overlays for ids it has not seen are
drawn, so re-syncing after an unrelated upload leaves existing overlays
alone. ``render_html`` turns the current state into a Leaflet page via
folium.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

import folium
from loguru import logger

from atlas.layers.exporters.geojson import export_geojson
from atlas.layers.layer import Layer
from atlas.map.basemaps import DEFAULT_BASEMAP, Basemap, get_basemap
from atlas.map.regions import DEFAULT_FOCUS_ZOOM, FOCUS_REGIONS, Bounds, LatLng, get_region

DEFAULT_CENTER: LatLng = (22.9734, 78.6569)
DEFAULT_ZOOM = 5
MARKER_COLOR = "#10b981"
FALLBACK_OVERLAY_COLOR = "#2563eb"


@dataclass(frozen=True)
class ViewState:
    """Where the map is looking.

    When ``bounds`` is set the renderer fits to it and ignores center/zoom.
    """

    center: LatLng = DEFAULT_CENTER
    zoom: int = DEFAULT_ZOOM
    bounds: Bounds | None = None
    animate: bool = False

    def to_dict(self) -> dict:
        return {
            "center": list(self.center),
            "zoom": self.zoom,
            "bounds": [list(c) for c in self.bounds] if self.bounds else None,
            "animate": self.animate,
        }


@dataclass
class Overlay:
    """A drawn layer. ``draw_count`` grows each time the overlay is (re)built."""

    layer_id: str
    name: str
    color: str
    geojson: dict = field(default_factory=dict)
    draw_count: int = 0

    @property
    def feature_count(self) -> int:
        return len(self.geojson.get("features", []))


class MapView:
    """Map presentation state for one session."""

    def __init__(
        self,
        center: LatLng = DEFAULT_CENTER,
        zoom: int = DEFAULT_ZOOM,
        basemap: str = DEFAULT_BASEMAP,
        focus_zoom: int = DEFAULT_FOCUS_ZOOM,
    ) -> None:
        self._basemap: Basemap = get_basemap(basemap)
        self._focus_zoom = focus_zoom
        self.view = ViewState(center=center, zoom=zoom)
        self.focused_region: str | None = None
        self._overlays: dict[str, Overlay] = {}
        self._last_snapshot: tuple[Layer, ...] | None = None

    # ------------------------------------------------------------------
    # Base map and markers
    # ------------------------------------------------------------------

    @property
    def basemap(self) -> Basemap:
        return self._basemap

    def set_basemap(self, name: str) -> Basemap:
        """Switch base tiles. Unknown names raise UnknownBasemap, no change."""
        self._basemap = get_basemap(name)
        return self._basemap

    @property
    def markers(self) -> list[dict]:
        return [
            {"name": r.name, "center": list(r.center), "color": MARKER_COLOR}
            for r in FOCUS_REGIONS.values()
        ]

    # ------------------------------------------------------------------
    # Focus
    # ------------------------------------------------------------------

    def focus_on(self, region_name: str) -> ViewState:
        """Re-center on a named focus region.

        Raises:
            UnknownRegion: Name not in the fixed region set; the view is
                left as it was.
        """
        try:
            region = get_region(region_name)
        except KeyError:
            logger.warning(f"Focus request for unknown region: {region_name!r}")
            raise

        if region.bounds is not None:
            self.view = replace(self.view, bounds=region.bounds, animate=False)
        else:
            zoom = region.zoom if region.zoom is not None else self._focus_zoom
            self.view = ViewState(center=region.center, zoom=zoom, bounds=None, animate=True)
        self.focused_region = region.name
        logger.info(f"Map focused on {region.name}")
        return self.view

    # ------------------------------------------------------------------
    # Overlays
    # ------------------------------------------------------------------

    @property
    def overlays(self) -> list[Overlay]:
        """Overlays in draw order (store insertion order)."""
        return list(self._overlays.values())

    def get_overlay(self, layer_id: str) -> Overlay | None:
        return self._overlays.get(layer_id)

    def sync(self, layers: tuple[Layer, ...]) -> None:
        """Bring overlays in line with a store snapshot."""
        if layers is self._last_snapshot:
            return
        self._last_snapshot = layers

        synced: dict[str, Overlay] = {}
        for layer in layers:
            overlay = self._overlays.get(layer.layer_id)
            if overlay is None:
                overlay = self._draw(layer)
            synced[layer.layer_id] = overlay
        for gone in self._overlays.keys() - synced.keys():
            logger.debug(f"Overlay dropped: {gone}")
        self._overlays = synced

    def _draw(self, layer: Layer) -> Overlay:
        geojson = export_geojson(layer)
        overlay = Overlay(
            layer_id=layer.layer_id,
            name=layer.name,
            color=layer.color or FALLBACK_OVERLAY_COLOR,
            geojson=geojson,
            draw_count=1,
        )
        logger.debug(f"Overlay drawn: {layer.layer_id} ({overlay.feature_count} features)")
        return overlay

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def build_map(self) -> folium.Map:
        """Build a folium map for the current view, markers, and overlays."""
        m = folium.Map(
            location=list(self.view.center),
            zoom_start=self.view.zoom,
            tiles=None,
        )
        folium.TileLayer(
            tiles=self._basemap.url,
            attr=self._basemap.attribution,
            name=self._basemap.name,
        ).add_to(m)

        for region in FOCUS_REGIONS.values():
            folium.CircleMarker(
                location=list(region.center),
                radius=6,
                color=MARKER_COLOR,
                fill=True,
                fill_color=MARKER_COLOR,
                tooltip=region.name,
            ).add_to(m)

        for overlay in self._overlays.values():
            self._add_overlay(m, overlay)
        folium.LayerControl().add_to(m)

        if self.view.bounds is not None:
            m.fit_bounds([list(c) for c in self.view.bounds])
        return m

    def render_html(self) -> str:
        return self.build_map().get_root().render()

    @staticmethod
    def _add_overlay(m: folium.Map, overlay: Overlay) -> None:
        group = folium.FeatureGroup(name=overlay.name)
        features = overlay.geojson.get("features", [])
        if features:
            # folium mutates its input and needs unique feature ids to
            # wire up styling, so hand it a numbered copy.
            data = {
                "type": "FeatureCollection",
                "features": [
                    {**f, "id": f"{overlay.layer_id}-{i}"}
                    for i, f in enumerate(features)
                    if f.get("geometry") is not None
                ],
            }
            if data["features"]:
                color = overlay.color
                folium.GeoJson(
                    data,
                    style_function=lambda _f, color=color: {
                        "color": color,
                        "weight": 2,
                        "fillOpacity": 0.2,
                    },
                    tooltip=overlay.name,
                ).add_to(group)
        group.add_to(m)
