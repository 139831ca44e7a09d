"""Kwik embed resolution: packed-string decoder, extractors and resolver."""

from __future__ import annotations

from .extractors import (
    extract_bypass_form,
    extract_packed_payload,
    extract_session_cookie,
)
from .packed import decode_packed
from .resolver import KwikResolver

__all__ = [
    "KwikResolver",
    "decode_packed",
    "extract_bypass_form",
    "extract_packed_payload",
    "extract_session_cookie",
]
