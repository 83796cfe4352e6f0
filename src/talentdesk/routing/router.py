"""Server router: first-match linear scan over registered routes.

Server routes are the seam for collaborators (the data API, health
checks) that must claim their paths before the SPA catch-all. Route
counts are small and fixed at startup, so a scan in registration order
is all the structure needed.
"""

from talentdesk.errors import MethodNotAllowed, NotFound
from talentdesk.routing.pattern import PathPattern
from talentdesk.routing.route import Route, RouteMatch


class Router:
    """Compiled router.

    Usage::

        router = Router()
        router.add(Route("/api/health", handler, frozenset({"GET"})))
        router.compile()
        match = router.match("GET", "/api/health")
    """

    __slots__ = ("_compiled", "_entries")

    def __init__(self) -> None:
        self._entries: list[tuple[PathPattern, Route]] = []
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        self._entries.append((PathPattern(route.path), route))

    @property
    def routes(self) -> list[Route]:
        """All registered routes, in registration order."""
        return [route for _, route in self._entries]

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request path and method against registered routes.

        Returns the first route whose pattern and method both match.
        Raises ``MethodNotAllowed`` if only the pattern matched, and
        ``NotFound`` if nothing did.
        """
        allowed: set[str] = set()
        for pattern, route in self._entries:
            params = pattern.match(path)
            if params is None:
                continue
            if method in route.methods or (method == "HEAD" and "GET" in route.methods):
                return RouteMatch(route=route, path_params=params)
            allowed.update(route.methods)

        if allowed:
            raise MethodNotAllowed(frozenset(allowed))
        raise NotFound(f"No route matches {method} {path!r}")
