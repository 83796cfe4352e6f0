"""Immutable HTTP request.

Only what the serving layer needs: method, path, query string, headers,
and the path parameters filled in by the router.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from talentdesk._internal.asgi import Receive


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request built from an ASGI scope."""

    method: str
    path: str
    query_string: bytes
    headers: tuple[tuple[bytes, bytes], ...]
    client: tuple[str, int] | None
    path_params: dict[str, str] = field(default_factory=dict)

    _receive: Receive | None = field(default=None, repr=False, compare=False)

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of header *name* (case-insensitive)."""
        wanted = name.lower().encode("latin-1")
        for key, value in self.headers:
            if key.lower() == wanted:
                return value.decode("latin-1")
        return default

    @property
    def url(self) -> str:
        """Path plus query string, as the client sent it."""
        if self.query_string:
            return f"{self.path}?{self.query_string.decode('latin-1')}"
        return self.path

    def with_path_params(self, params: dict[str, str]) -> Request:
        """Return a copy carrying router-captured path parameters."""
        return replace(self, path_params=params)

    async def body(self) -> bytes:
        """Read the full request body from the ASGI receive channel."""
        if self._receive is None:
            return b""
        chunks: list[bytes] = []
        while True:
            message = await self._receive()
            chunks.append(message.get("body", b""))
            if not message.get("more_body", False):
                break
        return b"".join(chunks)

    @classmethod
    def from_asgi(cls, scope: dict[str, Any], receive: Receive | None = None) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        client = scope.get("client")
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            query_string=scope.get("query_string", b""),
            headers=tuple(scope.get("headers", ())),
            client=tuple(client) if client else None,
            _receive=receive,
        )
