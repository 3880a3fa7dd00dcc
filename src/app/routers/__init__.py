"""HTTP routers for the FRA Atlas API."""

from app.routers.claims import router as claims_router
from app.routers.demo import router as demo_router
from app.routers.layers import router as layers_router
from app.routers.map import router as map_router
from app.routers.rules import router as rules_router

__all__ = [
    "claims_router",
    "demo_router",
    "layers_router",
    "map_router",
    "rules_router",
]
