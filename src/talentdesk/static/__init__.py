"""Static root resolution: where the built frontend bundle lives.

Resolved once at startup and passed into the app by reference.
"""

from talentdesk.static.resolver import (
    ENTRY_DOCUMENT,
    ResolvedRoot,
    ServeState,
    default_candidates,
    default_fallback,
    resolve_static_root,
)

__all__ = [
    "ENTRY_DOCUMENT",
    "ResolvedRoot",
    "ServeState",
    "default_candidates",
    "default_fallback",
    "resolve_static_root",
]
