"""Health-check HTTP service: one route answering with a fixed message."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from cmsadmin import __version__

HEALTH_MESSAGE = "Health Check OK"


def create_health_app() -> FastAPI:
    app = FastAPI(
        title="cms-admin",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.api_route(
        "/",
        methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        response_class=PlainTextResponse,
    )
    async def health() -> str:
        return HEALTH_MESSAGE

    return app
