"""Claims dashboard API — filtered table, status totals, per-state chart."""

from __future__ import annotations

from fastapi import APIRouter, Query

from atlas.claims import ALL_STATES, CLAIMS, FOCUS_STATES, chart_rows, filter_claims, status_totals

router = APIRouter(prefix="/api/claims", tags=["claims"])


@router.get("")
async def list_claims(
    state: str = Query(default=ALL_STATES),
    search: str = Query(default=""),
):
    """Claims matching the state filter and search text."""
    rows = filter_claims(CLAIMS, state=state, search=search)
    return {
        "claims": [c.to_dict() for c in rows],
        "count": len(rows),
        "totals": status_totals(rows),
        "chart": chart_rows(rows),
    }


@router.get("/states")
async def list_states():
    return {"states": [ALL_STATES, *FOCUS_STATES]}
