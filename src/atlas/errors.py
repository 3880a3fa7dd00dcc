"""Error taxonomy for the atlas engine.

Empty analysis selections are not errors: the rules return a guidance
string instead (see ``atlas.rules``).
"""

from __future__ import annotations


class AtlasError(Exception):
    """Base class for all atlas engine errors."""


class MalformedInput(AtlasError, ValueError):
    """Uploaded content is not JSON or not a recognizable FeatureCollection."""


class UnknownRegion(AtlasError, KeyError):
    """Requested focus region is not part of the fixed region set."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown focus region: {self.name}"


class UnknownBasemap(AtlasError, KeyError):
    """Requested basemap is not one of the configured tile providers."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown basemap: {self.name}"
