"""Demo greeting shown on the landing page."""

from __future__ import annotations

from fastapi import APIRouter

from app.config import settings

router = APIRouter(prefix="/api", tags=["demo"])


@router.get("/demo")
async def demo():
    return {"message": settings.demo_message}
