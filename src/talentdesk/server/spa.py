"""SPA fallback: the terminal handler for every unmatched request.

Anything that is neither a registered route nor a static file is treated
as a client-side route: the entry document is served and the browser's
router takes over. Without an entry document the response is a fixed
"not ready" 404.
"""

import logging

import anyio.to_thread

from talentdesk._internal import fs
from talentdesk.config import NOT_READY_MESSAGE
from talentdesk.http.request import Request
from talentdesk.http.response import HTML, Response, text_response
from talentdesk.static.resolver import ResolvedRoot

logger = logging.getLogger("talentdesk.server")


class SPAFallback:
    """Serve the entry document of a resolved static root.

    The serve state is fixed at resolution time. In ``DEGRADED`` state the
    filesystem is never consulted; in ``READY`` state the entry document is
    re-checked before each read so a removed file yields the not-ready
    response instead of an error.
    """

    __slots__ = ("_message", "_root")

    def __init__(self, root: ResolvedRoot, *, message: str = NOT_READY_MESSAGE) -> None:
        self._root = root
        self._message = message

    @property
    def root(self) -> ResolvedRoot:
        return self._root

    async def __call__(self, request: Request) -> Response:
        if self._root.is_ready:
            entry = self._root.entry_document
            if fs.is_file(entry):
                body = await anyio.to_thread.run_sync(entry.read_bytes)
                return Response(body=body, content_type=HTML).with_header(
                    "Cache-Control", "no-cache"
                )
            logger.warning("Entry document disappeared: %s", entry)

        logger.debug("404 %s %s (no entry document)", request.method, request.path)
        return text_response(self._message, status=404)
