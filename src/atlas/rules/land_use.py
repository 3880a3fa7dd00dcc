"""Land-use summary — tally features by their category attribute."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from atlas.layers.layer import Layer
from atlas.rules.properties import resolve_category

NO_LAYER_MESSAGE = "Select a layer first."


@dataclass(frozen=True)
class CategoryCount:
    category: str
    count: int
    percent: float


@dataclass(frozen=True)
class LandUseSummary:
    layer_name: str
    total: int
    categories: tuple[CategoryCount, ...]


def tally_land_use(layer: Layer) -> LandUseSummary:
    """Count features per category, most frequent first."""
    counts = Counter(resolve_category(f) for f in layer.data.features)
    total = layer.feature_count
    if total == 0:
        return LandUseSummary(layer_name=layer.name, total=0, categories=())

    categories = tuple(
        CategoryCount(category=k, count=v, percent=v / total * 100)
        for k, v in sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    )
    return LandUseSummary(layer_name=layer.name, total=total, categories=categories)


def format_land_use(summary: LandUseSummary) -> str:
    lines = [f'Land Use summary for "{summary.layer_name}" (features: {summary.total}):']
    lines.extend(
        f"- {c.category}: {c.count} ({c.percent:.1f}%)" for c in summary.categories
    )
    return "\n".join(lines)


def summarize(layer: Layer | None) -> str:
    """Land-use report text for a layer, or guidance when none is selected."""
    if layer is None:
        return NO_LAYER_MESSAGE
    return format_land_use(tally_land_use(layer))
