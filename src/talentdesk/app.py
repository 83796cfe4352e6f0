"""The talentdesk ASGI application and its factory.

``create_app()`` resolves the static root once and injects it; ``App``
compiles routes and middleware into an immutable pipeline on first use:

    user middleware -> registered routes -> StaticFiles(root) -> SPAFallback

Registered routes own their paths (the data API is mounted there); every
other request is a static asset or a client-side route.
"""

import threading
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from functools import partial
from typing import Any, TypeAlias

from talentdesk._internal.asgi import Receive, Scope, Send
from talentdesk._internal.invoke import invoke
from talentdesk.config import ServerConfig
from talentdesk.http.request import Request
from talentdesk.http.response import Response
from talentdesk.middleware.protocol import Middleware
from talentdesk.middleware.static import StaticFiles
from talentdesk.routing.route import Route
from talentdesk.routing.router import Router
from talentdesk.server.handler import handle_request
from talentdesk.server.spa import SPAFallback
from talentdesk.static.resolver import (
    ResolvedRoot,
    default_candidates,
    default_fallback,
    resolve_static_root,
)

Handler: TypeAlias = Callable[..., Any]


@dataclass(frozen=True, slots=True)
class _PendingRoute:
    path: str
    handler: Handler
    methods: list[str] | None
    name: str | None


class App:
    """The talentdesk application.

    Mutable during setup (route registration, middleware, hooks).
    Frozen at runtime when ``__call__()`` is first invoked.

    Thread safety:
        The freeze transition uses a Lock + double-check so exactly one
        thread compiles the pipeline even if several workers deliver
        their first request at the same time. The resolved root is
        read-only from construction on.
    """

    __slots__ = (
        "_fallback",
        "_freeze_lock",
        "_frozen",
        "_middleware",
        "_middleware_list",
        "_pending_routes",
        "_router",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
        "root",
    )

    def __init__(self, root: ResolvedRoot, config: ServerConfig | None = None) -> None:
        self.config: ServerConfig = config or ServerConfig()
        self.root: ResolvedRoot = root
        self._pending_routes: list[_PendingRoute] = []
        self._middleware_list: list[Middleware] = []
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Set by _freeze()
        self._router: Router | None = None
        self._middleware: tuple[Callable[..., Any], ...] = ()
        self._fallback: Callable[[Request], Awaitable[Response]] | None = None

    # -- Setup --

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a server route that takes precedence over the SPA fallback.

        Args:
            path: URL pattern. Use ``:param`` or ``{param}`` for path parameters.
            methods: HTTP methods. Defaults to ``["GET"]``.
            name: Optional route name, shown by introspection.
        """

        def decorator(func: Handler) -> Handler:
            self._check_not_frozen()
            self._pending_routes.append(_PendingRoute(path, func, methods, name))
            return func

        return decorator

    def add_middleware(self, middleware: Middleware) -> None:
        """Add a middleware; it wraps routes, static files and the fallback."""
        self._check_not_frozen()
        self._middleware_list.append(middleware)

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a hook run on ASGI lifespan startup."""
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a hook run on ASGI lifespan shutdown."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    @property
    def router(self) -> Router:
        self._ensure_frozen()
        assert self._router is not None
        return self._router

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()
        assert self._router is not None
        assert self._fallback is not None

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            middleware=self._middleware,
            fallback=self._fallback,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app before the first HTTP request, then runs the
        registered startup/shutdown hooks.
        """
        self._ensure_frozen()

        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    for hook in self._startup_hooks:
                        await invoke(hook)
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                for hook in self._shutdown_hooks:
                    await invoke(hook)
                await send({"type": "lifespan.shutdown.complete"})
                return

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Serve the app with pounce until interrupted."""
        from talentdesk.server.run import run_server

        self._ensure_frozen()
        run_server(
            self,
            host=host or self.config.host,
            port=port or self.config.port,
            workers=self.config.workers,
            log_level=self.config.log_level,
        )

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        router = Router()
        for pending in self._pending_routes:
            methods = frozenset(m.upper() for m in (pending.methods or ["GET"]))
            router.add(
                Route(path=pending.path, handler=pending.handler, methods=methods, name=pending.name)
            )
        router.compile()
        self._router = router

        static = StaticFiles(
            self.root.path,
            prefix="/",
            index=self.root.index,
            cache_control=self.config.cache_control,
        )
        self._middleware = tuple(self._middleware_list)
        spa = SPAFallback(self.root, message=self.config.not_ready_message)
        self._fallback = partial(static, next=spa)

        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes, middleware, and hooks before serving."
            )
            raise RuntimeError(msg)


def create_app(config: ServerConfig | None = None) -> App:
    """Resolve the static root for *config* and build the app around it.

    Resolution happens here, eagerly and exactly once; the returned app
    never looks for a different build output.
    """
    config = config or ServerConfig()
    candidates = config.static_candidates or default_candidates(config.base_dir)
    root = resolve_static_root(
        candidates,
        fallback=default_fallback(config.base_dir),
        index=config.index,
    )
    return App(root, config)
