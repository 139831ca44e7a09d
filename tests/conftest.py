"""Shared test fixtures for the kwikresolve test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from kwikresolve.domain.entities.kwik import ResolvedLink

EMBED_URL = "https://kwik.cx/e/Ab12Cd34"
FORM_ACTION = "https://kwik.cx/d/Ab12Cd34"
FORM_TOKEN = "tok123"
DIRECT_URL = "https://cdn.example/video.mp4"

# Ten distinct characters, none of them '"' or ',' (the page pattern excludes both).
PAGE_ALPHABET = "FtbRVsKCNp"
PAGE_OFFSET = 29
PAGE_BASE = 7

BYPASS_FORM_HTML = (
    f'<form action="{FORM_ACTION}" method="POST">'
    f'<input type="hidden" name="_token" value="{FORM_TOKEN}">'
    '<button type="submit">Download</button></form>'
)


def encode_packed(plaintext: str, alphabet: str, offset: int, base: int) -> str:
    """Inverse of decode_packed: one base-N numeral per character."""
    segments: list[str] = []
    for char in plaintext:
        value = ord(char) + offset
        digits: list[str] = []
        while True:
            value, digit = divmod(value, base)
            digits.append(alphabet[digit])
            if value == 0:
                break
        segments.append("".join(reversed(digits)))
    return alphabet[base].join(segments)


def build_kwik_page(
    decoded_html: str,
    *,
    alphabet: str = PAGE_ALPHABET,
    offset: int = PAGE_OFFSET,
    base: int = PAGE_BASE,
) -> str:
    """Embed page markup carrying ``decoded_html`` as a packed call."""
    encoded = encode_packed(decoded_html, alphabet, offset, base)
    return (
        "<!DOCTYPE html><html><head><title>kwik</title>"
        "<script>var player = {autoplay: false};</script></head><body>"
        "<script>eval(function(h,u,n,t,e,r){r=\"\";"
        "return decodeURIComponent(escape(r))}"
        f'("{encoded}",61,"{alphabet}",{offset},{base},32))</script>'
        "</body></html>"
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def embed_url() -> str:
    return EMBED_URL


@pytest.fixture()
def form_action() -> str:
    return FORM_ACTION


@pytest.fixture()
def form_token() -> str:
    return FORM_TOKEN


@pytest.fixture()
def direct_url() -> str:
    return DIRECT_URL


@pytest.fixture()
def bypass_form_html() -> str:
    return BYPASS_FORM_HTML


@pytest.fixture()
def packed_encoder() -> Callable[[str, str, int, int], str]:
    """Inverse of decode_packed, for seeding decoder fixtures."""
    return encode_packed


@pytest.fixture()
def kwik_page() -> Callable[..., str]:
    """Factory building an embed page around decoded markup."""
    return build_kwik_page


@pytest.fixture()
def bypass_page() -> str:
    """Embed page whose packed payload decodes to a valid bypass form."""
    return build_kwik_page(BYPASS_FORM_HTML)


class FakeResolver:
    """LinkResolverPort stand-in returning a fixed link or raising."""

    def __init__(
        self,
        url: str = DIRECT_URL,
        error: Exception | None = None,
    ) -> None:
        self._url = url
        self._error = error
        self.calls: list[str] = []

    @property
    def name(self) -> str:
        return "fake"

    async def resolve(self, url: str) -> ResolvedLink:
        self.calls.append(url)
        if self._error is not None:
            raise self._error
        return ResolvedLink(url=self._url, source=url)


@pytest.fixture()
def fake_resolver() -> Callable[..., FakeResolver]:
    """Factory: ``fake_resolver()`` succeeds, ``fake_resolver(error=exc)`` raises."""

    def _make(url: str = DIRECT_URL, error: Exception | None = None) -> FakeResolver:
        return FakeResolver(url=url, error=error)

    return _make
