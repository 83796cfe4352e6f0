"""talentdesk: production server for the talent registration app.

Serves the built single-page frontend: static assets from the first build
directory that exists, the entry document for every client-side route,
and a plain "being built" 404 when there is nothing to serve yet.

Basic usage::

    from talentdesk import ServerConfig, create_app

    app = create_app(ServerConfig(base_dir="server"))

    @app.route("/api/health")
    def health():
        return {"ok": True, "state": app.root.state.value}

    app.run()
"""

__version__ = "1.0.0"
__all__ = [
    "App",
    "ConfigurationError",
    "Forbidden",
    "HTTPError",
    "MethodNotAllowed",
    "Middleware",
    "Next",
    "NotFound",
    "Request",
    "ResolvedRoot",
    "Response",
    "ServeState",
    "ServerConfig",
    "StaticRootError",
    "TalentDeskError",
    "create_app",
    "resolve_static_root",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import talentdesk`` fast while providing a clean top-level API.
    """
    if name in ("App", "create_app"):
        from talentdesk import app as _app

        return getattr(_app, name)

    if name == "ServerConfig":
        from talentdesk.config import ServerConfig

        return ServerConfig

    if name == "Request":
        from talentdesk.http.request import Request

        return Request

    if name == "Response":
        from talentdesk.http.response import Response

        return Response

    if name in ("Middleware", "Next"):
        from talentdesk.middleware import protocol as _mw

        return getattr(_mw, name)

    if name in ("ResolvedRoot", "ServeState", "resolve_static_root"):
        from talentdesk.static import resolver as _resolver

        return getattr(_resolver, name)

    if name in (
        "ConfigurationError",
        "Forbidden",
        "HTTPError",
        "MethodNotAllowed",
        "NotFound",
        "StaticRootError",
        "TalentDeskError",
    ):
        from talentdesk import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
