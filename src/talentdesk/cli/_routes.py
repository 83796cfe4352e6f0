"""``talentdesk routes`` and ``talentdesk match``: client route table."""

import argparse

from talentdesk.routing.client import CLIENT_ROUTES, ClientRouteTable


def run_routes(args: argparse.Namespace, table: ClientRouteTable = CLIENT_ROUTES) -> None:  # noqa: ARG001
    """Print the table in match order as PATTERN / VIEW columns."""
    rows = [(route.pattern or "*", route.view) for route in table]
    width = max(max(len(pattern) for pattern, _ in rows), len("PATTERN"))

    fmt = f"{{:<{width}}}  {{}}"
    print(fmt.format("PATTERN", "VIEW"))
    print("-" * (width + 2 + max(len(view) for _, view in rows)))
    for pattern, view in rows:
        print(fmt.format(pattern, view))


def run_match(args: argparse.Namespace, table: ClientRouteTable = CLIENT_ROUTES) -> None:
    """Print the view for ``args.path`` and any captured parameters."""
    match = table.match(args.path)
    if match is None:
        print(f"{args.path}: no matching view")
        raise SystemExit(1)

    params = ", ".join(f"{name}={value}" for name, value in match.params.items())
    print(f"{args.path} -> {match.view}" + (f" ({params})" if params else ""))
