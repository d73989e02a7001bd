"""Exceptions raised by stylefix operations."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stylefix.fixer.conflicts import StyleConflict


class StyleFixError(Exception):
    """Base class for all stylefix failures."""


class UnknownStyleError(StyleFixError, ValueError):
    """A style tag is neither 'go_zero' nor 'gozero'."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"unknown naming style {value!r} "
            f"(expected 'go_zero' or 'gozero')"
        )


class TraversalError(StyleFixError):
    """A directory in the project tree could not be read."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        super().__init__(f"failed to read directory {self.path}: {reason}")


class RemovalError(StyleFixError):
    """A conflicting file was confirmed present but could not be deleted."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        super().__init__(
            f"failed to remove conflicting file {self.path}: {reason}"
        )


class ConflictsDetectedError(StyleFixError):
    """One or more directories still hold both files of a pair.

    Unlike the other errors this one is raised only after the whole
    tree has been audited, and carries every conflict found.
    """

    def __init__(self, conflicts: list[StyleConflict]):
        self.conflicts = list(conflicts)
        lines = "\n".join(c.describe() for c in self.conflicts)
        super().__init__(f"style conflicts detected:\n{lines}")


__all__ = [
    "StyleFixError",
    "UnknownStyleError",
    "TraversalError",
    "RemovalError",
    "ConflictsDetectedError",
]
