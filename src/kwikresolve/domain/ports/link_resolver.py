"""Port for resolving embed URLs to direct media URLs."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from kwikresolve.domain.entities.kwik import ResolvedLink


@runtime_checkable
class LinkResolverPort(Protocol):
    """Resolves an embed page URL to a direct, time-limited media URL.

    Implementations own the hoster-specific protocol (deobfuscation,
    session handling, redirect capture) and signal failure by raising
    a ``ResolveError`` subclass.
    """

    @property
    def name(self) -> str:
        """Hoster name this resolver handles (e.g. 'kwik')."""
        ...

    async def resolve(self, url: str) -> ResolvedLink:
        """Resolve an embed URL; raises ResolveError on any stage failure."""
        ...
