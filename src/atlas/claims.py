"""Claims dashboard — mock FRA claims with filtering and per-state stats."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable

FOCUS_STATES: tuple[str, ...] = ("Madhya Pradesh", "Tripura", "Odisha", "Telangana")
STATUSES: tuple[str, ...] = ("Pending", "Claimed", "Rejected")
ALL_STATES = "All"


@dataclass(frozen=True)
class Claim:
    id: str
    claimant: str
    village: str
    state: str
    area_ha: float
    status: str
    submitted_at: str  # ISO date

    def to_dict(self) -> dict:
        return asdict(self)


CLAIMS: tuple[Claim, ...] = (
    Claim("MP-001", "Asha Devi", "Sehore", "Madhya Pradesh", 2.3, "Pending", "2025-06-01"),
    Claim("MP-002", "Rakesh", "Betul", "Madhya Pradesh", 1.1, "Claimed", "2025-05-15"),
    Claim("TR-101", "Deb", "Udaipur", "Tripura", 0.8, "Rejected", "2025-04-21"),
    Claim("OD-050", "Sita", "Koraput", "Odisha", 3.6, "Pending", "2025-06-12"),
    Claim("TG-210", "Ravi", "Nizamabad", "Telangana", 1.9, "Claimed", "2025-05-25"),
    Claim("OD-099", "Manoj", "Kendujhar", "Odisha", 2.0, "Rejected", "2025-05-05"),
    Claim("TR-111", "Rima", "Agartala", "Tripura", 1.2, "Pending", "2025-06-18"),
    Claim("TG-220", "Lakshmi", "Warangal", "Telangana", 0.9, "Pending", "2025-06-10"),
    Claim("MP-010", "Om", "Chhindwara", "Madhya Pradesh", 4.2, "Rejected", "2025-04-30"),
    Claim("OD-120", "Geeta", "Mayurbhanj", "Odisha", 1.5, "Claimed", "2025-06-05"),
)


def filter_claims(
    claims: Iterable[Claim] = CLAIMS,
    state: str = ALL_STATES,
    search: str = "",
) -> list[Claim]:
    """Claims in ``state`` (or any state for ``All``) matching ``search``.

    The search is a case-insensitive substring match over id, claimant,
    village, status and state.
    """
    needle = search.lower()
    result = []
    for c in claims:
        if state != ALL_STATES and c.state != state:
            continue
        haystack = " ".join([c.id, c.claimant, c.village, c.status, c.state]).lower()
        if needle in haystack:
            result.append(c)
    return result


def status_totals(claims: Iterable[Claim]) -> dict[str, int]:
    totals = {s: 0 for s in STATUSES}
    for c in claims:
        if c.status in totals:
            totals[c.status] += 1
    return totals


def stats_by_state(claims: Iterable[Claim]) -> dict[str, dict[str, int]]:
    """Status counts per focus state; every state is present, zeros included."""
    stats = {state: {s: 0 for s in STATUSES} for state in FOCUS_STATES}
    for c in claims:
        if c.state in stats and c.status in stats[c.state]:
            stats[c.state][c.status] += 1
    return stats


def chart_rows(claims: Iterable[Claim]) -> list[dict]:
    """One bar-chart row per focus state, in fixed state order."""
    stats = stats_by_state(claims)
    return [{"state": state, **stats[state]} for state in FOCUS_STATES]
