"""Fixed focus regions — the four FRA focus states the map can jump to."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from atlas.errors import UnknownRegion

LatLng = tuple[float, float]
Bounds = tuple[LatLng, LatLng]  # ((south, west), (north, east))

DEFAULT_FOCUS_ZOOM = 7


@dataclass(frozen=True)
class FocusRegion:
    """A named area with a center/zoom or a bounding box.

    When ``bounds`` is set it wins over ``center``/``zoom`` for view fitting.
    """

    name: str
    center: LatLng
    zoom: int | None = None
    bounds: Bounds | None = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "center": list(self.center),
            "zoom": self.zoom,
            "bounds": [list(c) for c in self.bounds] if self.bounds else None,
        }


FOCUS_REGIONS: MappingProxyType[str, FocusRegion] = MappingProxyType({
    r.name: r
    for r in (
        FocusRegion("Madhya Pradesh", (23.4733, 77.9470), zoom=6),
        FocusRegion("Tripura", (23.9408, 91.9882), zoom=8),
        FocusRegion("Odisha", (20.9517, 85.0985), zoom=7),
        FocusRegion("Telangana", (18.1124, 79.0193), zoom=7),
    )
})


def get_region(name: str) -> FocusRegion:
    """Look up a focus region by exact name.

    Raises:
        UnknownRegion: Name is not in ``FOCUS_REGIONS``.
    """
    try:
        return FOCUS_REGIONS[name]
    except KeyError:
        raise UnknownRegion(name) from None
