"""FRA Atlas — FastAPI application.

One AtlasSession (layer store, map view, smart help panel) lives on
``app.state.session`` for the lifetime of the process.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app.config import settings
from app.routers import claims_router, demo_router, layers_router, map_router, rules_router
from atlas.map.view import MapView
from atlas.session import AtlasSession

VERSION = "0.1.0"


def create_session() -> AtlasSession:
    """Build a session from settings."""
    map_view = MapView(
        center=(settings.map_center_lat, settings.map_center_lng),
        zoom=settings.map_default_zoom,
        basemap=settings.basemap,
        focus_zoom=settings.focus_default_zoom,
    )
    return AtlasSession(
        map_view=map_view,
        record_limit=settings.change_record_limit,
        color_seed=settings.color_seed,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: log startup, close the session on shutdown.

    Each startup gets a live session; one closed by a previous shutdown is
    replaced.
    """
    logger.info(f"{settings.app_name} v{VERSION} starting")
    session = getattr(app.state, "session", None)
    if session is None or session.closed:
        app.state.session = create_session()

    yield

    session = getattr(app.state, "session", None)
    if session is not None:
        session.close()
        app.state.session = None
    logger.info(f"{settings.app_name} shutting down...")


# Create FastAPI app
app = FastAPI(
    title="FRA Atlas",
    description="Forest Rights Act Atlas & WebGIS decision support",
    version=VERSION,
    lifespan=lifespan,
)
app.state.session = create_session()

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(layers_router)
app.include_router(map_router)
app.include_router(rules_router)
app.include_router(claims_router)
app.include_router(demo_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    session = app.state.session
    return {
        "status": "operational",
        "version": VERSION,
        "system": settings.app_name,
        "layers": len(session.store) if session is not None else 0,
    }

