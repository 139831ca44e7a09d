"""FastAPI application factory (create_app)."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

import structlog
from fastapi import FastAPI, Request
from starlette.responses import Response

from kwikresolve.infrastructure.config import AppConfig
from kwikresolve.interfaces.api.resolve import router as resolve_router
from kwikresolve.interfaces.app_state import AppState
from kwikresolve.interfaces.composition import lifespan

log = structlog.get_logger(__name__)


def create_app(config: AppConfig) -> FastAPI:
    """Build the FastAPI app and its routes.

    The HTTP client and resolver are created later, in lifespan().
    """
    app = FastAPI(
        title="kwikresolve",
        description="Resolves kwik embed links to direct media URLs",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state = AppState()
    app.state.config = config

    app.include_router(resolve_router)

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        """Liveness check; answers 200 while the process is up."""
        return {"status": "ok"}

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ):
        start = time.perf_counter()
        response: Response | None = None
        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000.0
            log.info(
                "http_request",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code if response is not None else 500,
                duration_ms=round(duration_ms, 2),
                client_host=(request.client.host if request.client else None),
            )

    return app
