"""Composition root: dependency injection via FastAPI lifespan."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, cast

import httpx
import structlog
from fastapi import FastAPI

from kwikresolve.application.use_cases import ResolveLinkUseCase
from kwikresolve.infrastructure.config import AppConfig
from kwikresolve.infrastructure.http_client import create_http_client
from kwikresolve.infrastructure.kwik import KwikResolver
from kwikresolve.interfaces.app_state import AppState

log = structlog.get_logger(__name__)


def build_resolver(config: AppConfig, http_client: httpx.AsyncClient) -> KwikResolver:
    """Wire the kwik resolver from configuration."""
    return KwikResolver(
        http_client,
        origin=config.kwik_origin,
        user_agent=config.http_user_agent,
        timeout=config.http_timeout_seconds,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan Hook: create and clean up all resources (DI Composition Root).

    Order matters:
        1. HTTP client (shared, cookie-less)
        2. Resolver (uses HTTP client)
        3. Resolve use case (uses resolver)
    """
    state = cast(AppState, app.state)
    config = state.config

    state.http_client = create_http_client(timeout_seconds=config.http_timeout_seconds)
    log.info(
        "http_client_initialized",
        timeout_seconds=config.http_timeout_seconds,
    )

    state.resolver = build_resolver(config, state.http_client)
    state.resolve_uc = ResolveLinkUseCase(resolver=state.resolver)
    log.info(
        "resolver_initialized",
        hoster=state.resolver.name,
        origin=config.kwik_origin,
    )

    try:
        yield
    finally:
        await state.http_client.aclose()
        log.info("app_shutdown")
