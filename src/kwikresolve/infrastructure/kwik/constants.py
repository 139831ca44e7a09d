"""Shared constants for the kwik resolver."""

from __future__ import annotations

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/119.0.0.0 Safari/537.36"
)

DEFAULT_ORIGIN = "https://kwik.cx"

DEFAULT_TIMEOUT_SECONDS = 15.0

HTML_ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,"
    "image/avif,image/webp,*/*;q=0.8"
)

SESSION_COOKIE_NAME = "kwik_session"
