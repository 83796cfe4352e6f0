"""Server configuration.

ServerConfig is a frozen dataclass, immutable after creation and passed
explicitly into ``create_app()`` rather than read from module globals.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from talentdesk.errors import ConfigurationError

NOT_READY_MESSAGE = "Application is being built. Please try again later."


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Server configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ServerConfig(port=5000, base_dir="/srv/talentdesk/server")
    """

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    workers: int = 1

    # Static root resolution. Default candidates are offsets from base_dir;
    # static_candidates, when given, replaces them (priority = order).
    base_dir: str | Path = "server"
    static_candidates: tuple[str | Path, ...] = ()

    # SPA serving
    index: str = "index.html"
    cache_control: str = "public, max-age=0"
    not_ready_message: str = NOT_READY_MESSAGE

    # Logging
    log_level: str = "info"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServerConfig:
        """Build a config from ``HOST``, ``PORT``, ``LOG_LEVEL`` and
        ``TALENTDESK_BASE_DIR``. Unset variables keep their defaults.

        Raises:
            ConfigurationError: If ``PORT`` is not an integer.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}
        if "HOST" in env:
            overrides["host"] = env["HOST"]
        if "PORT" in env:
            try:
                overrides["port"] = int(env["PORT"])
            except ValueError:
                msg = f"PORT must be an integer, got {env['PORT']!r}"
                raise ConfigurationError(msg) from None
        if "LOG_LEVEL" in env:
            overrides["log_level"] = env["LOG_LEVEL"].lower()
        if "TALENTDESK_BASE_DIR" in env:
            overrides["base_dir"] = env["TALENTDESK_BASE_DIR"]
        return cls(**overrides)  # type: ignore[arg-type]
