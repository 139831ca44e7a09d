"""Pattern extraction for kwik pages and their decoded markup."""

from __future__ import annotations

import re
from collections.abc import Iterable

from kwikresolve.domain.entities.kwik import BypassForm, PackedPayload
from kwikresolve.domain.exceptions import ParseError

from .constants import SESSION_COOKIE_NAME

_SESSION_COOKIE_RE = re.compile(rf"({SESSION_COOKIE_NAME}=[^;]+)")

# ("encoded", 12, "alphabet", offset, base, 34x)
_PACKED_CALL_RE = re.compile(
    r'\(\s*"([^",]*)"\s*,\s*\d+\s*,\s*"([^",]*)"\s*,\s*(\d+)\s*,\s*(\d+)'
    r"\s*,\s*\d+[a-zA-Z]?\s*\)",
    re.ASCII,
)

_FORM_ACTION_RE = re.compile(r'action="([^"]+)"')
_FORM_TOKEN_RE = re.compile(r'value="([^"]+)"')


def extract_session_cookie(set_cookie_headers: Iterable[str]) -> str:
    """Return the first ``kwik_session=<value>`` token, or "" if none."""
    for header in set_cookie_headers:
        match = _SESSION_COOKIE_RE.search(header)
        if match:
            return match.group(1)
    return ""


def extract_packed_payload(html: str) -> PackedPayload:
    """Find the first packed call in the page and return its arguments."""
    match = _PACKED_CALL_RE.search(html)
    if not match:
        raise ParseError("payload")
    return PackedPayload(
        encoded=match.group(1),
        alphabet=match.group(2),
        offset=int(match.group(3)),
        base=int(match.group(4)),
    )


def extract_bypass_form(decoded: str) -> BypassForm:
    """Pull the form action URL and hidden token out of decoded markup."""
    action = _FORM_ACTION_RE.search(decoded)
    token = _FORM_TOKEN_RE.search(decoded)
    if not action or not token:
        raise ParseError("form")
    return BypassForm(action=action.group(1), token=token.group(1))
