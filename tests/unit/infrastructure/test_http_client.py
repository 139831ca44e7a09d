"""Tests for the shared outbound HTTP client."""

from __future__ import annotations

import httpx
import pytest

from kwikresolve.infrastructure.http_client import create_http_client


class TestCreateHttpClient:
    @pytest.mark.asyncio
    async def test_defaults(self) -> None:
        client = create_http_client(timeout_seconds=12.0)
        async with client:
            assert client.follow_redirects is False
            assert client.timeout.read == 12.0
            assert client.headers["User-Agent"].startswith("python-httpx/")

    @pytest.mark.asyncio
    async def test_never_stores_cookies(self) -> None:
        client = create_http_client(timeout_seconds=5.0)
        response = httpx.Response(
            200,
            headers={"set-cookie": "kwik_session=abc; Path=/"},
            request=httpx.Request("GET", "https://kwik.cx/e/abc"),
        )
        async with client:
            client.cookies.extract_cookies(response)
            assert len(client.cookies.jar) == 0
