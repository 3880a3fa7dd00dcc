"""Map API — focus regions, view state, basemaps, overlays, and the map page."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse

from app.routers.deps import get_session, session_unavailable
from atlas.errors import UnknownBasemap, UnknownRegion
from atlas.map.basemaps import BASEMAPS
from atlas.map.regions import FOCUS_REGIONS

router = APIRouter(tags=["map"])


@router.get("/api/map/regions")
async def list_regions():
    """The fixed focus regions offered by the map."""
    return {"regions": [r.to_dict() for r in FOCUS_REGIONS.values()]}


@router.get("/api/map/view")
async def get_view(request: Request):
    session = get_session(request)
    if session is None:
        return session_unavailable()
    mv = session.map_view
    return {
        **mv.view.to_dict(),
        "focused_region": mv.focused_region,
        "basemap": mv.basemap.name,
    }


@router.post("/api/map/focus/{region_name}")
async def focus_region(request: Request, region_name: str):
    """Re-center the map on a focus region. Unknown names leave the view as is."""
    session = get_session(request)
    if session is None:
        return session_unavailable()
    try:
        view = session.map_view.focus_on(region_name)
    except UnknownRegion as e:
        return JSONResponse(status_code=404, content={"error": str(e)})
    return {**view.to_dict(), "focused_region": region_name}


@router.get("/api/map/basemaps")
async def list_basemaps():
    return {
        "basemaps": [
            {"name": b.name, "url": b.url, "attribution": b.attribution}
            for b in BASEMAPS.values()
        ]
    }


@router.post("/api/map/basemap/{name}")
async def set_basemap(request: Request, name: str):
    session = get_session(request)
    if session is None:
        return session_unavailable()
    try:
        basemap = session.map_view.set_basemap(name)
    except UnknownBasemap as e:
        return JSONResponse(status_code=404, content={"error": str(e)})
    return {"basemap": basemap.name}


@router.get("/api/map/overlays")
async def list_overlays(request: Request):
    """Overlays currently drawn, in draw order."""
    session = get_session(request)
    if session is None:
        return session_unavailable()
    return {
        "overlays": [
            {
                "layer_id": o.layer_id,
                "name": o.name,
                "color": o.color,
                "feature_count": o.feature_count,
                "draw_count": o.draw_count,
            }
            for o in session.map_view.overlays
        ],
        "markers": session.map_view.markers,
    }


@router.get("/", response_class=HTMLResponse)
async def map_page(request: Request):
    """Serve the Leaflet map page for the current session."""
    session = get_session(request)
    if session is None:
        return session_unavailable()
    return HTMLResponse(content=session.map_view.render_html())
