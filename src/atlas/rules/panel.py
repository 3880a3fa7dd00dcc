"""SmartHelpPanel — layer selection state and the last rule output."""

from __future__ import annotations

from atlas.layers.layer import Layer
from atlas.rules.changes import DEFAULT_RECORD_LIMIT, detect_changes
from atlas.rules.land_use import summarize

INITIAL_OUTPUT = "Use Smart Rules to analyze your data."


class SmartHelpPanel:
    """Holds which layers are selected for analysis.

    Selections start as the first and second layers of the snapshot the
    panel is created with. After that they persist by id across snapshot
    changes and are cleared only when their layer disappears.
    """

    def __init__(
        self,
        layers: tuple[Layer, ...] = (),
        record_limit: int = DEFAULT_RECORD_LIMIT,
    ) -> None:
        self._layers = layers
        self._record_limit = record_limit
        self.primary_id: str | None = layers[0].layer_id if len(layers) > 0 else None
        self.secondary_id: str | None = layers[1].layer_id if len(layers) > 1 else None
        self.output = INITIAL_OUTPUT

    @property
    def layers(self) -> tuple[Layer, ...]:
        return self._layers

    @property
    def primary(self) -> Layer | None:
        return self._find(self.primary_id)

    @property
    def secondary(self) -> Layer | None:
        return self._find(self.secondary_id)

    def sync(self, layers: tuple[Layer, ...]) -> None:
        self._layers = layers
        if self.primary is None:
            self.primary_id = None
        if self.secondary is None:
            self.secondary_id = None

    def select_primary(self, layer_id: str | None) -> None:
        self.primary_id = self._checked(layer_id)

    def select_secondary(self, layer_id: str | None) -> None:
        self.secondary_id = self._checked(layer_id)

    def run_land_use(self) -> str:
        self.output = summarize(self.primary)
        return self.output

    def run_detect_changes(self) -> str:
        self.output = detect_changes(self.primary, self.secondary, limit=self._record_limit)
        return self.output

    def _find(self, layer_id: str | None) -> Layer | None:
        if layer_id is None:
            return None
        for layer in self._layers:
            if layer.layer_id == layer_id:
                return layer
        return None

    def _checked(self, layer_id: str | None) -> str | None:
        if layer_id is not None and self._find(layer_id) is None:
            raise KeyError(f"Layer not found: {layer_id}")
        return layer_id
