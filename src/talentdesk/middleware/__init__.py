"""Middleware: Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    StaticFiles -- Serve the built frontend bundle from the static root
"""

from talentdesk.middleware.protocol import Middleware, Next
from talentdesk.middleware.static import StaticFiles

__all__ = [
    "Middleware",
    "Next",
    "StaticFiles",
]
