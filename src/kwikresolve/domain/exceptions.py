"""Resolution errors.

Every failure aborts the resolution immediately. ``kind`` stays available
for logs and alerting even where the HTTP layer collapses all of them to
one status code.
"""

from __future__ import annotations


class ResolveError(Exception):
    """Base class for all resolution failures."""

    kind = "resolve"


class FetchError(ResolveError):
    """Network or status failure while talking to the hoster."""

    kind = "fetch"

    def __init__(
        self,
        stage: str,
        *,
        status: int | None = None,
        cause: str | None = None,
    ) -> None:
        self.stage = stage
        self.status = status
        self.cause = cause
        if status is not None:
            message = f"Failed to fetch kwik {stage}. Status: {status}"
        else:
            message = f"Failed to fetch kwik {stage}: {cause or 'network'}"
        super().__init__(message)


class ParseError(ResolveError):
    """Expected pattern missing from the page or decoded markup."""

    kind = "parse"

    _MESSAGES = {
        "payload": (
            "Obfuscated JS parameters not found. "
            "The site structure might have changed."
        ),
        "form": "Failed to extract hidden POST URL or Token.",
    }

    def __init__(self, stage: str) -> None:
        self.stage = stage
        super().__init__(self._MESSAGES.get(stage, f"Failed to parse {stage}."))


class DecodeError(ResolveError):
    """Packed string could not be turned into valid text."""

    kind = "decode"


class RedirectError(ResolveError):
    """Bypass answered 302 without a usable Location."""

    kind = "redirect"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(
            "302 Redirect received but Location header was missing."
            if reason == "missing-location"
            else f"Bypass redirect unusable: {reason}"
        )


class BypassError(ResolveError):
    """Bypass POST answered with something other than 302."""

    kind = "bypass"

    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(f"Bypass failed. Expected 302, got {status}.")
