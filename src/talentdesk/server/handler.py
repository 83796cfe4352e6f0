"""ASGI handler: translates ASGI scope/messages to talentdesk types.

The only component that touches raw ASGI HTTP messages. Builds a
Request, runs it through middleware, then registered routes, then the
SPA fallback, and sends the Response back through ASGI send().
"""

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias

from talentdesk._internal.asgi import Receive, Scope, Send
from talentdesk._internal.invoke import invoke
from talentdesk.errors import HTTPError, NotFound
from talentdesk.http.request import Request
from talentdesk.http.response import Response, text_response
from talentdesk.middleware.protocol import Next
from talentdesk.routing.route import RouteMatch
from talentdesk.routing.router import Router
from talentdesk.server.negotiation import negotiate
from talentdesk.server.sender import send_response

logger = logging.getLogger("talentdesk.server")

Fallback: TypeAlias = Callable[[Request], Awaitable[Response]]


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    middleware: tuple[Callable[..., Any], ...],
    fallback: Fallback,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    async def dispatch(req: Request) -> Response:
        try:
            match = router.match(req.method, req.path)
        except NotFound:
            return await fallback(req)
        return await _invoke_handler(match, req)

    handler: Next = dispatch
    for mw in reversed(middleware):
        handler = _wrap(mw, handler)

    try:
        response = await handler(request)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception:
        logger.exception("500 %s %s", request.method, request.path)
        response = text_response("Internal Server Error", status=500)

    await send_response(response, send, head=request.method == "HEAD")


def _wrap(mw: Callable[..., Any], inner: Next) -> Next:
    async def call(req: Request) -> Response:
        return await mw(req, inner)

    return call


async def _invoke_handler(match: RouteMatch, request: Request) -> Response:
    """Call the matched route handler with the request and path params."""
    handler = match.route.handler
    request = request.with_path_params(match.path_params)

    kwargs: dict[str, Any] = {}
    for name, param in inspect.signature(handler).parameters.items():
        if name == "request" or param.annotation is Request:
            kwargs[name] = request
        elif name in match.path_params:
            kwargs[name] = match.path_params[name]

    return negotiate(await invoke(handler, **kwargs))


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a plain-text Response."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)
    response = text_response(exc.detail or f"Error {exc.status}", status=exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response
