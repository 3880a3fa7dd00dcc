"""Serve the FRA Atlas API: ``python -m app`` or the ``fra-atlas`` script."""

import uvicorn

from app.config import settings


def run() -> None:
    """Start uvicorn on the configured host and port."""
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    run()
