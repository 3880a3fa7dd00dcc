"""Change detection — field-level diff of features matched by identifier.

Features are matched across two layers by ``resolve_identifier``. When
either layer has no identifiable features, only the feature counts are
compared. The full change list is always computed; ``limit`` only caps
how many records the text report prints.
"""

from __future__ import annotations

from dataclasses import dataclass

from atlas.layers.layer import Feature, Layer
from atlas.rules.properties import MISSING, render_value, resolve_identifier, values_equal

NO_PAIR_MESSAGE = "Select two layers to compare."
DEFAULT_RECORD_LIMIT = 50


@dataclass(frozen=True)
class FieldChange:
    feature_id: str
    prop: str
    old: str
    new: str

    def __str__(self) -> str:
        return f"{self.feature_id}: {self.prop} {self.old} → {self.new}"


@dataclass(frozen=True)
class ChangeReport:
    primary_name: str
    secondary_name: str
    count_delta: int
    matched: int
    changes: tuple[FieldChange, ...]
    counts_only: bool

    @property
    def changed_fields(self) -> int:
        return len(self.changes)


def index_by_id(features) -> dict[str, Feature]:
    """Map identifier -> feature. Unidentifiable features are skipped."""
    index: dict[str, Feature] = {}
    for feature in features:
        fid = resolve_identifier(feature)
        if fid is not None:
            index[fid] = feature
    return index


def diff_properties(fid: str, old: Feature, new: Feature) -> list[FieldChange]:
    """One FieldChange per property name whose value differs."""
    pa, pb = old.properties, new.properties
    changes = []
    for key in dict.fromkeys([*pa, *pb]):
        va = pa.get(key, MISSING)
        vb = pb.get(key, MISSING)
        if not values_equal(va, vb):
            changes.append(FieldChange(fid, key, render_value(va), render_value(vb)))
    return changes


def compare_layers(primary: Layer, secondary: Layer) -> ChangeReport:
    index_a = index_by_id(primary.data.features)
    index_b = index_by_id(secondary.data.features)
    counts_only = not index_a or not index_b

    matched = 0
    changes: list[FieldChange] = []
    if not counts_only:
        for fid, fa in index_a.items():
            fb = index_b.get(fid)
            if fb is None:
                continue
            matched += 1
            changes.extend(diff_properties(fid, fa, fb))

    return ChangeReport(
        primary_name=primary.name,
        secondary_name=secondary.name,
        count_delta=primary.feature_count - secondary.feature_count,
        matched=matched,
        changes=tuple(changes),
        counts_only=counts_only,
    )


def format_changes(report: ChangeReport, limit: int = DEFAULT_RECORD_LIMIT) -> str:
    delta = report.count_delta
    lines = [
        f'Change detection between "{report.primary_name}" and "{report.secondary_name}":',
        f"- Feature count delta: {'+' if delta > 0 else ''}{delta}",
    ]
    if report.counts_only:
        lines.append("- No matching ids found; compared by counts only.")
    else:
        lines.append(f"- Matched by id: {report.matched}. Changed fields: {report.changed_fields}")
    lines.extend(f"  • {c}" for c in report.changes[:limit])
    if report.changed_fields > limit:
        lines.append(f"  …and {report.changed_fields - limit} more")
    return "\n".join(lines)


def detect_changes(
    primary: Layer | None,
    secondary: Layer | None,
    limit: int = DEFAULT_RECORD_LIMIT,
) -> str:
    """Change report text, or guidance unless two distinct layers are given."""
    if primary is None or secondary is None or primary.layer_id == secondary.layer_id:
        return NO_PAIR_MESSAGE
    return format_changes(compare_layers(primary, secondary), limit=limit)
