"""Logging setup for the ``talentdesk`` command.

Library modules only create named loggers (``talentdesk.server``,
``talentdesk.static``); handlers are installed here, by the process that
owns stderr. Lines look like::

    3:04:05 PM [static] Serving static files from: /srv/app/client/dist
"""

import logging
import sys
import time

LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class SourceFormatter(logging.Formatter):
    """``<h:mm:ss AM/PM> [<source>] <message>``.

    The source is the last component of the logger name unless the
    record carries an explicit ``source`` via ``extra=``.
    """

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        stamp = time.strftime("%I:%M:%S %p", time.localtime(record.created))
        return stamp.lstrip("0")

    def format(self, record: logging.LogRecord) -> str:
        source = getattr(record, "source", None) or record.name.rsplit(".", 1)[-1]
        line = f"{self.formatTime(record)} [{source}] {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def configure_logging(level: str = "info", *, stream: object = None) -> logging.Handler:
    """Attach a SourceFormatter handler to the ``talentdesk`` logger.

    Idempotent: a handler installed by an earlier call is replaced.

    Raises:
        ValueError: If *level* is not a known level name.
    """
    try:
        numeric = LOG_LEVELS[level.lower()]
    except KeyError:
        msg = f"Unknown log level {level!r}; expected one of {', '.join(LOG_LEVELS)}"
        raise ValueError(msg) from None

    root = logging.getLogger("talentdesk")
    for existing in list(root.handlers):
        if isinstance(existing.formatter, SourceFormatter):
            root.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)  # type: ignore[arg-type]
    handler.setFormatter(SourceFormatter())
    root.addHandler(handler)
    root.setLevel(numeric)
    return handler
