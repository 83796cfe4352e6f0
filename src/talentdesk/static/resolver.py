"""Static root resolution.

Picks the directory that holds the built frontend bundle. Runs once at
startup, before the server accepts connections; the result is handed to
the app explicitly and never re-evaluated for the life of the process.

When no build output exists the resolver substitutes an empty ``public``
directory beside the server so the process can still bind its port. A
build that is still in progress and a build that was never configured
both end up in the same degraded state.
"""

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from talentdesk._internal import fs
from talentdesk.errors import StaticRootError

logger = logging.getLogger("talentdesk.static")

ENTRY_DOCUMENT = "index.html"

# Build-output locations relative to the server directory, highest priority first.
_CANDIDATE_OFFSETS: tuple[str, ...] = (
    "../client/dist",
    "../dist",
    "public",
    "../server/public",
    "../public",
)


class ServeState(enum.Enum):
    """What the dispatcher can offer for unmatched paths."""

    READY = "ready-with-assets"
    DEGRADED = "degraded-empty"


@dataclass(frozen=True, slots=True)
class ResolvedRoot:
    """The directory static content is served from, fixed for the process."""

    path: Path
    state: ServeState
    index: str = ENTRY_DOCUMENT

    @property
    def entry_document(self) -> Path:
        return self.path / self.index

    @property
    def is_ready(self) -> bool:
        return self.state is ServeState.READY


def default_candidates(base_dir: str | Path) -> tuple[Path, ...]:
    """Default candidate list for a server living in *base_dir*."""
    base = Path(base_dir).resolve()
    return tuple((base / offset).resolve() for offset in _CANDIDATE_OFFSETS)


def default_fallback(base_dir: str | Path) -> Path:
    """The ``public`` directory colocated with the server."""
    return (Path(base_dir) / "public").resolve()


def resolve_static_root(
    candidates: Iterable[str | Path],
    *,
    fallback: str | Path,
    index: str = ENTRY_DOCUMENT,
) -> ResolvedRoot:
    """Return the first existing candidate, or the (created) fallback.

    Candidates are checked in order with a plain existence test; the first
    hit wins and the rest are never touched. If none exists, *fallback* is
    created with its parents. A failed ``mkdir`` is logged and otherwise
    ignored: the fallback is still returned and requests simply find no
    files.

    Raises:
        StaticRootError: If *candidates* is empty.
    """
    ordered = tuple(Path(c) for c in candidates)
    if not ordered:
        msg = "At least one static root candidate is required."
        raise StaticRootError(msg)

    chosen: Path | None = None
    for candidate in ordered:
        if fs.exists(candidate):
            chosen = candidate
            break

    if chosen is None:
        logger.warning("No static files found. Creating empty directory.")
        chosen = Path(fallback)
        try:
            chosen.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Failed to create public directory: %s", exc)

    logger.info("Serving static files from: %s", chosen)

    entry = chosen / index
    state = ServeState.READY if fs.is_file(entry) else ServeState.DEGRADED
    return ResolvedRoot(path=chosen, state=state, index=index)
