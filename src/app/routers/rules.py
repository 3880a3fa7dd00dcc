"""Smart rules API — layer selection, land-use summary, change detection."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.routers.deps import get_session, session_unavailable

router = APIRouter(prefix="/api/rules", tags=["rules"])


class SelectionRequest(BaseModel):
    """Layer ids to analyze; null clears a slot."""
    primary_id: str | None = None
    secondary_id: str | None = None


def _selection(panel) -> dict:
    return {
        "primary_id": panel.primary_id,
        "secondary_id": panel.secondary_id,
        "output": panel.output,
    }


@router.get("/selection")
async def get_selection(request: Request):
    session = get_session(request)
    if session is None:
        return session_unavailable()
    return _selection(session.panel)


@router.put("/selection")
async def set_selection(request: Request, body: SelectionRequest):
    """Select primary and secondary layers. Unknown ids are rejected whole."""
    session = get_session(request)
    if session is None:
        return session_unavailable()
    panel = session.panel
    for layer_id in (body.primary_id, body.secondary_id):
        if layer_id is not None and session.store.get_layer(layer_id) is None:
            return JSONResponse(
                status_code=404,
                content={"error": f"Layer not found: {layer_id}"},
            )
    panel.select_primary(body.primary_id)
    panel.select_secondary(body.secondary_id)
    return _selection(panel)


@router.post("/land-use")
async def run_land_use(request: Request):
    session = get_session(request)
    if session is None:
        return session_unavailable()
    return {"output": session.panel.run_land_use()}


@router.post("/changes")
async def run_detect_changes(request: Request):
    session = get_session(request)
    if session is None:
        return session_unavailable()
    return {"output": session.panel.run_detect_changes()}
