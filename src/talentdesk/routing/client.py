"""Client route table: which view the browser renders for a URL.

The server never consults this for dispatch (every unmatched path gets the
entry document); it documents the SPA's routes and backs ``talentdesk
routes`` / ``talentdesk match``. Dispatch is first-match-wins over the
ordered table, with a final wildcard entry for "not found".
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from talentdesk.errors import ConfigurationError
from talentdesk.routing.pattern import WILDCARD, PathPattern


@dataclass(frozen=True, slots=True)
class ClientRoute:
    """One row of the table: a URL pattern and the view it renders.

    A pattern of ``None`` (or ``"*"``) matches every path.
    """

    view: str
    pattern: str | None = None
    _compiled: PathPattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", PathPattern(self.pattern or WILDCARD))

    @property
    def is_wildcard(self) -> bool:
        return self.pattern in (None, WILDCARD)

    def match(self, path: str) -> dict[str, str] | None:
        return self._compiled.match(path)


@dataclass(frozen=True, slots=True)
class ClientRouteMatch:
    route: ClientRoute
    params: dict[str, str]

    @property
    def view(self) -> str:
        return self.route.view


class ClientRouteTable:
    """An ordered, immutable list of client routes."""

    __slots__ = ("_routes",)

    def __init__(self, routes: Sequence[ClientRoute]) -> None:
        if not routes:
            msg = "A client route table needs at least one route."
            raise ConfigurationError(msg)
        self._routes = tuple(routes)

    def __iter__(self) -> Iterator[ClientRoute]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def match(self, path: str) -> ClientRouteMatch | None:
        """First route matching *path*, or ``None`` without a wildcard entry."""
        for route in self._routes:
            params = route.match(path)
            if params is not None:
                if route.is_wildcard:
                    params = {}
                return ClientRouteMatch(route=route, params=params)
        return None


CLIENT_ROUTES = ClientRouteTable(
    [
        ClientRoute("Register", "/"),
        ClientRoute("Register", "/register"),
        ClientRoute("Admin", "/admin"),
        ClientRoute("Dashboard", "/dashboard"),
        ClientRoute("Dashboard", "/talents"),
        ClientRoute("Dashboard", "/presentations"),
        ClientRoute("Dashboard", "/settings"),
        ClientRoute("Dashboard", "/analytics"),
        ClientRoute("Dashboard", "/media"),
        ClientRoute("Dashboard", "/calendar"),
        ClientRoute("Presentation", "/presentation/:id"),
        ClientRoute("PromoterView", "/talent/:id"),
        ClientRoute("NotFound"),
    ]
)
