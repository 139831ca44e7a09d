"""Application state container for FastAPI dependency injection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from starlette.datastructures import State

from kwikresolve.infrastructure.config import AppConfig

if TYPE_CHECKING:
    from kwikresolve.application.use_cases import ResolveLinkUseCase
    from kwikresolve.domain.ports import LinkResolverPort


class AppState(State):
    """FastAPI application state with all DI resources.

    Lifecycle managed by composition.py::lifespan().
    """

    # Configuration
    config: AppConfig

    # Infrastructure
    http_client: httpx.AsyncClient

    # Domain Ports
    resolver: LinkResolverPort

    # Application Services
    resolve_uc: ResolveLinkUseCase
