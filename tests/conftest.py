"""Shared fixtures: a fake deployment layout under ``tmp_path``.

    tmp_path/
        server/            <- base_dir
        client/dist/       <- built bundle (created by ``built_root``)
"""

import errno
import logging
import os
from collections.abc import Callable
from pathlib import Path

import pytest

from talentdesk.app import App
from talentdesk.static.resolver import ResolvedRoot, ServeState

INDEX_HTML = '<!doctype html><html><body><div id="root"></div></body></html>'
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    server = tmp_path / "server"
    server.mkdir()
    return server


@pytest.fixture
def built_root(tmp_path: Path) -> Path:
    """A client/dist bundle with an entry document and a few assets."""
    dist = tmp_path / "client" / "dist"
    assets = dist / "assets"
    assets.mkdir(parents=True)
    (dist / "index.html").write_text(INDEX_HTML)
    (assets / "app.js").write_text("console.log('talentdesk');")
    (assets / "style.css").write_text("body { margin: 0; }")
    (assets / "logo.png").write_bytes(PNG_BYTES)
    (assets / "data.bin").write_bytes(b"\x00\x01\x02")
    return dist


@pytest.fixture
def ready_app(built_root: Path) -> App:
    return App(ResolvedRoot(path=built_root, state=ServeState.READY))


@pytest.fixture
def empty_app(tmp_path: Path) -> App:
    public = tmp_path / "public"
    public.mkdir()
    return App(ResolvedRoot(path=public, state=ServeState.DEGRADED))


@pytest.fixture(autouse=True)
def _restore_talentdesk_logger():
    """CLI commands install handlers on the ``talentdesk`` logger."""
    logger = logging.getLogger("talentdesk")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def deny_stat(monkeypatch):
    """Make ``os.stat`` fail with EACCES for paths the given predicate picks."""
    real_stat = os.stat

    def install(denied: Callable[[Path], bool]) -> None:
        def guarded(path, *args, **kwargs):
            if isinstance(path, (str, os.PathLike)) and denied(Path(path)):
                raise PermissionError(errno.EACCES, "Permission denied", str(path))
            return real_stat(path, *args, **kwargs)

        monkeypatch.setattr(os, "stat", guarded)

    return install
