"""Routing: server routes for collaborators and the client route table.

Both are ordered lists matched first-match-wins with a linear scan.
"""

from talentdesk.routing.client import CLIENT_ROUTES, ClientRoute, ClientRouteMatch, ClientRouteTable
from talentdesk.routing.pattern import PathPattern, parse_path
from talentdesk.routing.route import Route, RouteMatch
from talentdesk.routing.router import Router

__all__ = [
    "CLIENT_ROUTES",
    "ClientRoute",
    "ClientRouteMatch",
    "ClientRouteTable",
    "PathPattern",
    "Route",
    "RouteMatch",
    "Router",
    "parse_path",
]
