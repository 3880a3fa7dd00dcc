"""AtlasSession — one store, one map view, one smart help panel.

The session is the in-process equivalent of a single page lifetime: the
map and the panel are subscribers of the store's EventBus and receive
each new snapshot after every upload or removal.
"""

from __future__ import annotations

from loguru import logger

from atlas.events import LAYERS_CHANGED, EventBus
from atlas.layers.colors import ColorPalette
from atlas.layers.layer import Layer
from atlas.layers.store import LayerStore
from atlas.map.view import MapView
from atlas.rules.panel import SmartHelpPanel


class AtlasSession:
    """Wires the layer store to its two consumers."""

    def __init__(
        self,
        store: LayerStore | None = None,
        map_view: MapView | None = None,
        record_limit: int = 50,
        color_seed: int | None = None,
    ) -> None:
        self.store = store or LayerStore(palette=ColorPalette(seed=color_seed))
        self.map_view = map_view or MapView()
        self.panel = SmartHelpPanel(self.store.layers, record_limit=record_limit)
        self.map_view.sync(self.store.layers)
        self._queue = self.store.subscribe()
        self.closed = False

    def upload(self, raw_text: str | bytes, filename: str) -> Layer:
        """Add a layer from a file selection or drag-and-drop."""
        layer = self.store.add_layer(raw_text, filename)
        self.dispatch()
        return layer

    def remove(self, layer_id: str) -> bool:
        removed = self.store.remove_layer(layer_id)
        self.dispatch()
        return removed

    def dispatch(self) -> int:
        """Deliver pending store events to the map and panel.

        Returns:
            Number of events handled.
        """
        events = EventBus.drain(self._queue)
        for event in events:
            if event.get("type") != LAYERS_CHANGED:
                continue
            snapshot = event["data"]["layers"]
            self.map_view.sync(snapshot)
            self.panel.sync(snapshot)
        if events:
            logger.debug(f"Session dispatched {len(events)} store event(s)")
        return len(events)

    def close(self) -> None:
        """Tear down: drop all layers and detach from the store.

        A closed session no longer hears about store changes and must not
        be reused.
        """
        if self.closed:
            return
        self.store.clear()
        self.dispatch()
        self.store.unsubscribe(self._queue)
        self.closed = True
