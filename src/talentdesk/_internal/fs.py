"""Filesystem probes that report any stat failure as absence.

Unlike ``Path.exists()``/``Path.is_file()``, a permission error or an
over-long name yields ``False`` here instead of raising.
"""

import os
import stat
from pathlib import Path


def _stat(path: str | Path) -> os.stat_result | None:
    try:
        return Path(path).stat()
    except (OSError, ValueError):
        return None


def exists(path: str | Path) -> bool:
    return _stat(path) is not None


def is_file(path: str | Path) -> bool:
    st = _stat(path)
    return st is not None and stat.S_ISREG(st.st_mode)


def is_dir(path: str | Path) -> bool:
    st = _stat(path)
    return st is not None and stat.S_ISDIR(st.st_mode)
