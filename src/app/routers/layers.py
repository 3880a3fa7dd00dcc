"""Layer API — upload, list, export, and remove GeoJSON overlays."""

from __future__ import annotations

from fastapi import APIRouter, File, Query, Request, UploadFile
from fastapi.responses import JSONResponse
from loguru import logger

from app.config import settings
from app.routers.deps import get_session, layer_summary, session_unavailable
from atlas.errors import MalformedInput
from atlas.layers.exporters.geojson import export_geojson

router = APIRouter(prefix="/api/layers", tags=["layers"])


def _add(session, content: bytes, filename: str):
    if len(content) > settings.max_upload_bytes:
        return JSONResponse(
            status_code=413,
            content={"error": f"Upload exceeds {settings.max_upload_bytes} bytes"},
        )
    try:
        layer = session.upload(content, filename)
    except MalformedInput as e:
        return JSONResponse(status_code=422, content={"error": str(e)})
    return JSONResponse(status_code=201, content=layer_summary(layer))


@router.get("")
async def list_layers(request: Request):
    """All layers in insertion order."""
    session = get_session(request)
    if session is None:
        return session_unavailable()
    layers = [layer_summary(l) for l in session.store.layers]
    return {"layers": layers, "count": len(layers)}


@router.post("")
async def upload_layer(request: Request, file: UploadFile = File(...)):
    """Add a layer from a selected file."""
    session = get_session(request)
    if session is None:
        return session_unavailable()
    content = await file.read()
    return _add(session, content, file.filename or "layer.geojson")


@router.post("/raw")
async def upload_raw(
    request: Request,
    filename: str = Query(default="layer.geojson", min_length=1),
):
    """Add a layer from a raw request body (drag-and-drop)."""
    session = get_session(request)
    if session is None:
        return session_unavailable()
    content = await request.body()
    return _add(session, content, filename)


@router.get("/{layer_id}/geojson")
async def layer_geojson(request: Request, layer_id: str):
    """The layer's feature collection as GeoJSON."""
    session = get_session(request)
    if session is None:
        return session_unavailable()
    layer = session.store.get_layer(layer_id)
    if layer is None:
        return JSONResponse(status_code=404, content={"error": f"Layer not found: {layer_id}"})
    return export_geojson(layer)


@router.delete("/{layer_id}")
async def remove_layer(request: Request, layer_id: str):
    """Remove a layer. Removing an unknown id is not an error."""
    session = get_session(request)
    if session is None:
        return session_unavailable()
    removed = session.remove(layer_id)
    if not removed:
        logger.debug(f"Remove ignored, no layer {layer_id}")
    return {"removed": removed, "count": len(session.store)}
