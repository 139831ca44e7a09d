"""Kwik hoster resolver: turns kwik.cx embed links into direct media URLs.

Protocol (one attempt per step, first failure aborts):
1. GET the embed page, keep its body and the ``kwik_session`` cookie.
2. Find the packed call in the markup and decode it.
3. Read the hidden form (action URL + ``_token``) from the decoded markup.
4. POST the token back with the session cookie, redirects disabled.
5. The 302 Location of that POST is the direct media URL.
"""

from __future__ import annotations

import httpx
import structlog

from kwikresolve.domain.entities.kwik import BypassForm, KwikSession, ResolvedLink
from kwikresolve.domain.exceptions import BypassError, FetchError, RedirectError

from .constants import (
    DEFAULT_ORIGIN,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    HTML_ACCEPT,
)
from .extractors import (
    extract_bypass_form,
    extract_packed_payload,
    extract_session_cookie,
)
from .packed import decode_packed

log = structlog.get_logger(__name__)


class KwikResolver:
    """Resolves kwik embed pages to direct media URLs.

    Holds no per-resolution state, so one instance serves any number of
    concurrent ``resolve`` calls over the shared client.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        origin: str = DEFAULT_ORIGIN,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._http = http_client
        self._origin = origin.rstrip("/")
        self._user_agent = user_agent
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "kwik"

    def _browser_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self._user_agent,
            "Referer": f"{self._origin}/",
            "Origin": self._origin,
            "Accept": HTML_ACCEPT,
        }

    async def resolve(self, url: str) -> ResolvedLink:
        """Run the full decode-and-bypass pipeline for one embed link."""
        html, session = await self._fetch_page(url)

        payload = extract_packed_payload(html)
        decoded = decode_packed(
            payload.encoded, payload.alphabet, payload.offset, payload.base
        )
        log.debug(
            "kwik_payload_decoded",
            url=url[:120],
            base=payload.base,
            decoded_length=len(decoded),
        )

        form = extract_bypass_form(decoded)
        location = await self._submit_bypass(url, form, session)

        log.info("kwik_resolved", url=url[:120], direct_url=location[:120])
        return ResolvedLink(url=location, source=url)

    async def _fetch_page(self, url: str) -> tuple[str, KwikSession]:
        """GET the embed page; return its markup and session cookie."""
        try:
            resp = await self._http.get(
                url,
                headers=self._browser_headers(),
                follow_redirects=True,
                timeout=self._timeout,
            )
        except httpx.TimeoutException as exc:
            log.warning("kwik_page_timeout", url=url[:120])
            raise FetchError("page", cause="timeout") from exc
        except httpx.InvalidURL as exc:
            log.warning("kwik_page_invalid_url", url=url[:120], error=str(exc))
            raise FetchError("page", cause="invalid-url") from exc
        except httpx.HTTPError as exc:
            log.warning("kwik_page_request_failed", url=url[:120], error=str(exc))
            raise FetchError("page", cause="network") from exc

        if not 200 <= resp.status_code < 300:
            log.warning("kwik_page_http_error", status=resp.status_code, url=url[:120])
            raise FetchError("page", status=resp.status_code)

        session = KwikSession(
            cookie=extract_session_cookie(resp.headers.get_list("set-cookie"))
        )
        if not session.cookie:
            log.debug("kwik_session_cookie_missing", url=url[:120])
        return resp.text, session

    async def _submit_bypass(
        self, url: str, form: BypassForm, session: KwikSession
    ) -> str:
        """POST the hidden token and return the redirect target."""
        headers = {
            **self._browser_headers(),
            # Always set explicitly so a client cookie jar can never add its own.
            "Cookie": session.cookie,
            "Referer": url,
        }
        try:
            resp = await self._http.post(
                form.action,
                headers=headers,
                data={"_token": form.token},
                follow_redirects=False,
                timeout=self._timeout,
            )
        except httpx.TimeoutException as exc:
            log.warning("kwik_bypass_timeout", action=form.action[:120])
            raise FetchError("bypass", cause="timeout") from exc
        except httpx.InvalidURL as exc:
            log.warning(
                "kwik_bypass_invalid_url", action=form.action[:120], error=str(exc)
            )
            raise FetchError("bypass", cause="invalid-url") from exc
        except httpx.HTTPError as exc:
            log.warning(
                "kwik_bypass_request_failed", action=form.action[:120], error=str(exc)
            )
            raise FetchError("bypass", cause="network") from exc

        if resp.status_code != 302:
            log.warning(
                "kwik_bypass_unexpected_status",
                status=resp.status_code,
                action=form.action[:120],
            )
            raise BypassError(resp.status_code)

        location = resp.headers.get("location")
        if not location:
            log.warning("kwik_bypass_location_missing", action=form.action[:120])
            raise RedirectError("missing-location")
        return location
