"""LayerStore — ordered registry of uploaded map overlays.

Manages the lifecycle of Layer objects: add from raw upload text, remove
by id, and snapshot reads. Every mutation replaces the snapshot tuple and
publishes it on the store's EventBus, so consumers can detect change by
identity and never hold a live handle.
"""

from __future__ import annotations

import re
import threading
import time
from datetime import datetime, timezone

from loguru import logger

from atlas.events import LAYERS_CHANGED, EventBus
from atlas.layers.colors import ColorPalette
from atlas.layers.layer import Layer
from atlas.layers.parsers.geojson import parse_geojson

_GEOJSON_SUFFIX = re.compile(r"\.geojson$", re.IGNORECASE)


def layer_name_from_filename(filename: str) -> str:
    """Strip a trailing ``.geojson`` (any case) from an upload filename."""
    return _GEOJSON_SUFFIX.sub("", filename)


class LayerStore:
    """Registry of user-added overlays with insertion-order semantics."""

    def __init__(
        self,
        palette: ColorPalette | None = None,
        event_bus: EventBus | None = None,
        clock=time.time,
    ) -> None:
        self._palette = palette or ColorPalette()
        self.event_bus = event_bus or EventBus()
        self._clock = clock
        self._lock = threading.Lock()
        self._layers: tuple[Layer, ...] = ()
        self._issued_ids: set[str] = set()

    @property
    def layers(self) -> tuple[Layer, ...]:
        """Current snapshot. Replaced, never mutated, on every change."""
        return self._layers

    def __len__(self) -> int:
        return len(self._layers)

    def get_layer(self, layer_id: str) -> Layer | None:
        """Get a layer by ID.

        Returns:
            The Layer if found, None otherwise.
        """
        for layer in self._layers:
            if layer.layer_id == layer_id:
                return layer
        return None

    def add_layer(self, raw_text: str | bytes, filename: str = "layer.geojson") -> Layer:
        """Parse an uploaded GeoJSON document and append it as a new layer.

        Args:
            raw_text: File content (text or UTF-8 bytes).
            filename: Upload filename; drives the layer id and name.

        Returns:
            The newly added Layer.

        Raises:
            MalformedInput: Content is not a FeatureCollection. The store
                is left unchanged.
        """
        try:
            data = parse_geojson(raw_text)
        except ValueError as e:
            logger.warning(f"Rejected upload {filename!r}: {e}")
            raise

        with self._lock:
            layer = Layer(
                layer_id=self._next_id(filename),
                name=layer_name_from_filename(filename),
                data=data,
                color=self._palette.next_color(),
                source_name=filename,
                created_at=datetime.now(timezone.utc).isoformat(),
            )
            self._layers = self._layers + (layer,)
            snapshot = self._layers

        logger.info(f"Layer added: {layer.layer_id} ({layer.feature_count} features)")
        self._notify(snapshot)
        return layer

    def remove_layer(self, layer_id: str) -> bool:
        """Remove a layer from the registry.

        Subscribers are notified either way.

        Returns:
            True if the layer was removed, False if it didn't exist.
        """
        with self._lock:
            survivors = tuple(l for l in self._layers if l.layer_id != layer_id)
            removed = len(survivors) != len(self._layers)
            self._layers = survivors
            snapshot = self._layers

        if removed:
            logger.info(f"Layer removed: {layer_id}")
        self._notify(snapshot)
        return removed

    def clear(self) -> None:
        """Drop every layer, as when the owning view goes away."""
        with self._lock:
            self._layers = ()
            snapshot = self._layers
        self._notify(snapshot)

    def subscribe(self):
        return self.event_bus.subscribe()

    def unsubscribe(self, q) -> None:
        self.event_bus.unsubscribe(q)

    def _next_id(self, filename: str) -> str:
        base = f"{filename}-{int(self._clock() * 1000)}"
        layer_id = base
        n = 2
        while layer_id in self._issued_ids:
            layer_id = f"{base}-{n}"
            n += 1
        self._issued_ids.add(layer_id)
        return layer_id

    def _notify(self, snapshot: tuple[Layer, ...]) -> None:
        self.event_bus.publish(LAYERS_CHANGED, {"layers": snapshot})
