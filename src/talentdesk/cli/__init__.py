"""talentdesk CLI: serve the built frontend and inspect routing.

Entry point registered as ``talentdesk`` in ``pyproject.toml``::

    [project.scripts]
    talentdesk = "talentdesk.cli:main"
"""

import argparse
import sys


def _add_root_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--base-dir",
        default=None,
        help="Server directory the default candidates are relative to",
    )
    parser.add_argument(
        "--root",
        action="append",
        default=None,
        metavar="PATH",
        help="Static root candidate; repeat to give several (first existing wins)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``talentdesk`` command."""
    parser = argparse.ArgumentParser(
        prog="talentdesk",
        description="talentdesk: production server for the talent registration app.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error", "critical"],
        help="Log level (default: LOG_LEVEL or info)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- talentdesk serve -------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Resolve the static root and serve")
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    serve_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker count (0=auto-detect)",
    )
    _add_root_args(serve_parser)

    # -- talentdesk resolve -----------------------------------------------
    resolve_parser = subparsers.add_parser(
        "resolve", help="Print the static root the server would use"
    )
    _add_root_args(resolve_parser)

    # -- talentdesk routes ------------------------------------------------
    subparsers.add_parser("routes", help="List the client route table")

    # -- talentdesk match -------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show which view renders a path")
    match_parser.add_argument("path", help="URL path (e.g. /talent/42)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from talentdesk.cli._serve import run_serve

        run_serve(args)
    elif args.command == "resolve":
        from talentdesk.cli._serve import run_resolve

        run_resolve(args)
    elif args.command == "routes":
        from talentdesk.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from talentdesk.cli._routes import run_match

        run_match(args)
