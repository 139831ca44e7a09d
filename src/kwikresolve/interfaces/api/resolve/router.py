"""Resolve endpoint: ``/?url=<embed link>`` -> direct media URL as JSON."""

from __future__ import annotations

from typing import cast

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from kwikresolve.interfaces.app_state import AppState

log = structlog.get_logger(__name__)

router = APIRouter(tags=["resolve"])

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

_USAGE = "?url=https://kwik.cx/e/..."


@router.options("/")
async def resolve_preflight() -> Response:
    """Answer CORS preflight requests."""
    return Response(headers=CORS_HEADERS)


@router.api_route("/", methods=["GET", "POST"])
async def resolve_link(request: Request, url: str | None = None) -> JSONResponse:
    """Resolve a kwik embed link.

    Returns ``{"success": true, "url": ...}`` on success, 400 when the
    ``url`` query parameter is missing and 500 for any resolution failure.
    """
    state = cast(AppState, request.app.state)

    if not url:
        return JSONResponse(
            content={
                "success": False,
                "error": "Missing 'url' parameter",
                "usage": _USAGE,
            },
            status_code=400,
            headers=CORS_HEADERS,
        )

    try:
        outcome = await state.resolve_uc.execute(url)
    except Exception as e:
        log.error("resolve_unexpected_error", url=url[:120], exc_info=True)
        return JSONResponse(
            content={"success": False, "error": str(e)},
            status_code=500,
            headers=CORS_HEADERS,
        )

    if not outcome.success:
        return JSONResponse(
            content={"success": False, "error": outcome.error},
            status_code=500,
            headers=CORS_HEADERS,
        )

    return JSONResponse(
        content={"success": True, "url": outcome.url},
        headers=CORS_HEADERS,
    )
