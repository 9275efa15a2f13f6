"""Route registration — mounts all routers under ``/api/v1``."""

from fastapi import FastAPI

from fever_server.routes.episodes import router as episodes_router
from fever_server.routes.readings import router as readings_router

API_PREFIX = "/api/v1"


def register_routes(app: FastAPI) -> None:
    """Include all sub-routers under the versioned API prefix."""
    app.include_router(episodes_router, prefix=API_PREFIX)
    app.include_router(readings_router, prefix=API_PREFIX)
