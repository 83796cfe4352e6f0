"""Errors raised by talentdesk.

Two families: setup errors (``ConfigurationError`` and friends) that stop
the process before it binds a port, and ``HTTPError`` subclasses that the
request handler turns into plain-text responses.
"""

from dataclasses import dataclass


class TalentDeskError(Exception):
    """Root of the talentdesk exception tree."""


class ConfigurationError(TalentDeskError):
    """Invalid settings, route patterns, or route tables.

    Raised from ``ServerConfig.from_env()``, ``create_app()`` or the first
    freeze of an ``App``; a running server never raises it.
    """


class StaticRootError(ConfigurationError):
    """The static root cannot be resolved (no candidates were given)."""


@dataclass(frozen=True, slots=True)
class HTTPError(TalentDeskError):
    """Abort the current request with *status*.

    ``headers`` are copied onto the error response, e.g. ``Allow`` for 405.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        return f"{self.status}: {self.detail}" if self.detail else str(self.status)


class Forbidden(HTTPError):  # noqa: N818
    """403. The request path escapes the static root."""

    def __init__(self, detail: str = "Forbidden") -> None:
        super().__init__(status=403, detail=detail)


class NotFound(HTTPError):  # noqa: N818
    """404. No server route claims the path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405. A server route claims the path but not the method."""

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow = ", ".join(sorted(allowed))
        super().__init__(
            status=405,
            detail=detail or f"Method not allowed. Allowed methods: {allow}",
            headers=(("Allow", allow),),
        )
