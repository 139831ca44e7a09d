"""Domain entities for kwik embed resolution.

Pure value objects without framework dependencies or I/O.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KwikSession:
    """Session state captured from the embed page response.

    Lives for exactly one resolution call.
    """

    cookie: str = ""  # "kwik_session=<value>" or "" when the page set none


@dataclass(frozen=True)
class PackedPayload:
    """Arguments of the packed call found in the embed page markup."""

    encoded: str
    alphabet: str  # position of each character is its digit value
    offset: int
    base: int  # alphabet[base] is the segment delimiter


@dataclass(frozen=True)
class BypassForm:
    """Hidden form recovered from the decoded markup."""

    action: str  # POST target
    token: str  # value of the hidden _token input


@dataclass(frozen=True)
class ResolvedLink:
    """Direct media URL taken from the bypass redirect."""

    url: str
    source: str = ""  # embed link it was resolved from


@dataclass(frozen=True)
class ResolveOutcome:
    """Result of one resolution as seen by the transport layer."""

    success: bool
    url: str | None = None
    error: str | None = None
    error_kind: str | None = None
