"""Static file serving middleware.

Serves files from the resolved static root. Paths that do not name a
regular file fall through to the next handler, which is how client-side
routes reach the SPA fallback.
"""

import mimetypes
from pathlib import Path

import anyio.to_thread

from talentdesk._internal import fs
from talentdesk.errors import Forbidden
from talentdesk.http.request import Request
from talentdesk.http.response import Response
from talentdesk.middleware.protocol import Next


class StaticFiles:
    """Middleware that serves static files from a directory.

    Files are served for ``GET`` and ``HEAD`` requests whose path (after
    *prefix*) names a regular file inside *directory*. Everything else
    falls through.

    Security: resolves symlinks and verifies the final path is within the
    configured directory; an escaping path raises ``Forbidden`` (403).

    Usage::

        app.add_middleware(StaticFiles(directory=root.path, prefix="/"))
    """

    __slots__ = ("_cache_control", "_directory", "_index", "_prefix")

    def __init__(
        self,
        directory: str | Path,
        prefix: str = "/",
        *,
        index: str = "index.html",
        cache_control: str = "public, max-age=0",
    ) -> None:
        self._directory = Path(directory).resolve()
        self._index = index
        self._cache_control = cache_control

        # "/" normalizes to "" so every path is a candidate.
        stripped = "/" + prefix.strip("/")
        self._prefix = stripped if stripped != "/" else ""

    @property
    def directory(self) -> Path:
        return self._directory

    async def __call__(self, request: Request, next: Next) -> Response:
        """Serve a static file or fall through."""
        # A root that is not a directory (e.g. a plain file) serves nothing.
        if request.method not in ("GET", "HEAD") or not fs.is_dir(self._directory):
            return await next(request)

        path = request.path
        if self._prefix:
            if not path.startswith(self._prefix + "/") and path != self._prefix:
                return await next(request)
            relative = path[len(self._prefix) :].lstrip("/")
        else:
            relative = path.lstrip("/")

        if "\x00" in relative:
            return await next(request)

        file_path = (self._directory / relative).resolve() if relative else self._directory
        if not file_path.is_relative_to(self._directory):
            raise Forbidden()

        if fs.is_dir(file_path):
            file_path = file_path / self._index

        if not fs.is_file(file_path):
            return await next(request)

        return await self._serve_file(file_path)

    async def _serve_file(self, file_path: Path) -> Response:
        """Read a file off the event loop and build a response."""
        content_type, _ = mimetypes.guess_type(file_path.name)
        if content_type is None:
            content_type = "application/octet-stream"
        elif content_type.startswith("text/") or content_type == "application/javascript":
            content_type = f"{content_type}; charset=utf-8"

        body = await anyio.to_thread.run_sync(file_path.read_bytes)

        return Response(body=body, content_type=content_type).with_header(
            "Cache-Control", self._cache_control
        )
