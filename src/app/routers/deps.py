"""Shared router helpers."""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse


def get_session(request: Request):
    """Get the atlas session from app state. Returns None if unavailable."""
    return getattr(request.app.state, "session", None)


def session_unavailable() -> JSONResponse:
    return JSONResponse(
        status_code=503,
        content={"error": "Atlas session not available"},
    )


def layer_summary(layer) -> dict:
    return {
        "id": layer.layer_id,
        "name": layer.name,
        "color": layer.color,
        "feature_count": layer.feature_count,
        "source_name": layer.source_name,
        "created_at": layer.created_at,
    }
