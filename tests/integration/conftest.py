"""Shared fixtures for integration tests.

These tests use the real HTTP client and resolver with HTTP mocked via respx.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import httpx
import pytest
import respx

from kwikresolve.infrastructure.http_client import create_http_client


@pytest.fixture()
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    """The production AsyncClient, for use with respx mocking."""
    client = create_http_client(timeout_seconds=5.0)
    async with client:
        yield client


@pytest.fixture()
def respx_mock() -> Iterator[respx.MockRouter]:
    """Explicit respx mock router for request interception."""
    with respx.mock(assert_all_called=False) as router:
        yield router
