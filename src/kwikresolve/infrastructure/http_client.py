"""Shared outbound HTTP client."""

from __future__ import annotations

from http.cookiejar import CookieJar, DefaultCookiePolicy

import httpx


def create_http_client(*, timeout_seconds: float) -> httpx.AsyncClient:
    """Build the AsyncClient shared by all resolutions.

    The cookie jar rejects every domain: session cookies are carried only
    through explicit headers and never outlive a single resolution. Request
    headers, User-Agent included, come from the resolver.
    """
    jar = CookieJar(policy=DefaultCookiePolicy(allowed_domains=[]))
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_seconds),
        cookies=httpx.Cookies(jar),
        follow_redirects=False,
    )
