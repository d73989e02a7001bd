"""Filesystem primitives shared by cleanup and validation."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from pathlib import Path

from stylefix.core.errors import TraversalError


def file_exists(path: Path | str) -> bool:
    """Return True if path names an existing regular file.

    Directories are not files. Any stat failure (missing, permission
    denied, broken symlink) counts as absent.
    """
    try:
        st = os.stat(path)
    except OSError:
        return False
    return stat.S_ISREG(st.st_mode)


def _raise_unless_missing(err: OSError) -> None:
    """os.walk error hook.

    A directory that vanished (or was replaced by a file) before it
    could be listed is skipped; anything else stops the walk.
    """
    if isinstance(err, (FileNotFoundError, NotADirectoryError)):
        return
    raise TraversalError(
        err.filename or "<unknown>", err.strerror or str(err)
    ) from err


def iter_directories(root: Path | str) -> Iterator[Path]:
    """Yield root and every directory beneath it, top-down.

    Children are visited in sorted order so repeated walks over the
    same tree agree. Symlinked directories are not followed. A missing
    root yields nothing.

    Raises:
        TraversalError: If a directory exists but cannot be listed
    """
    for dirpath, dirnames, _filenames in os.walk(
        root, onerror=_raise_unless_missing
    ):
        dirnames.sort()
        yield Path(dirpath)


__all__ = ["file_exists", "iter_directories"]
