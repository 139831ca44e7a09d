from .kwik import (
    BypassForm,
    KwikSession,
    PackedPayload,
    ResolvedLink,
    ResolveOutcome,
)

__all__ = [
    "BypassForm",
    "KwikSession",
    "PackedPayload",
    "ResolveOutcome",
    "ResolvedLink",
]
