"""``talentdesk serve`` and ``talentdesk resolve``.

Both build a ServerConfig from the environment, apply CLI overrides, and
resolve the static root exactly once.
"""

import argparse
import sys
from dataclasses import replace

from talentdesk.app import create_app
from talentdesk.config import ServerConfig
from talentdesk.errors import ConfigurationError
from talentdesk.logs import configure_logging


def _config_from_args(args: argparse.Namespace) -> ServerConfig:
    """Environment first, then explicit flags."""
    try:
        config = ServerConfig.from_env()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    overrides: dict[str, object] = {}
    if getattr(args, "host", None):
        overrides["host"] = args.host
    if getattr(args, "port", None):
        overrides["port"] = args.port
    if getattr(args, "workers", None) is not None:
        overrides["workers"] = args.workers
    if args.base_dir:
        overrides["base_dir"] = args.base_dir
    if args.root:
        overrides["static_candidates"] = tuple(args.root)
    if args.log_level:
        overrides["log_level"] = args.log_level
    return replace(config, **overrides)  # type: ignore[arg-type]


def run_serve(args: argparse.Namespace) -> None:
    """Resolve the static root, then serve until interrupted."""
    config = _config_from_args(args)
    configure_logging(config.log_level)
    app = create_app(config)
    app.run()


def run_resolve(args: argparse.Namespace) -> None:
    """Print the resolved root and its serve state.

    Resolution has the same side effect as at startup: the fallback
    directory is created when no candidate exists.
    """
    config = _config_from_args(args)
    configure_logging(config.log_level)
    app = create_app(config)
    print(f"root:  {app.root.path}")
    print(f"state: {app.root.state.value}")
