"""Resolve one embed link into a transport-agnostic outcome."""

from __future__ import annotations

from typing import Any

import structlog

from kwikresolve.domain.entities.kwik import ResolveOutcome
from kwikresolve.domain.exceptions import ResolveError
from kwikresolve.domain.ports import LinkResolverPort

log = structlog.get_logger(__name__)

# Stage-specific attributes worth attaching to the failure log.
_ERROR_FIELDS = ("stage", "status", "cause", "reason")


def _error_context(exc: ResolveError) -> dict[str, Any]:
    return {
        field: getattr(exc, field)
        for field in _ERROR_FIELDS
        if getattr(exc, field, None) is not None
    }


class ResolveLinkUseCase:
    """Runs a resolver once and folds its typed errors into a ResolveOutcome.

    Unexpected (non-ResolveError) exceptions propagate to the caller.
    """

    def __init__(self, *, resolver: LinkResolverPort) -> None:
        self._resolver = resolver

    async def execute(self, url: str) -> ResolveOutcome:
        try:
            link = await self._resolver.resolve(url)
        except ResolveError as exc:
            log.warning(
                "resolve_failed",
                hoster=self._resolver.name,
                url=url[:120],
                error_kind=exc.kind,
                error=str(exc),
                **_error_context(exc),
            )
            return ResolveOutcome(success=False, error=str(exc), error_kind=exc.kind)

        return ResolveOutcome(success=True, url=link.url)
