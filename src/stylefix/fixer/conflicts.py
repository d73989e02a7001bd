"""Detect and remove go_zero/gozero file naming collisions.

The two go-zero generator styles can both emit the same artifact into
one directory under different names (service_context.go next to
servicecontext.go), which breaks the Go build with duplicate
declarations. Resolution only ever deletes the file of the unwanted
style; file contents are never read.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from pydantic import BaseModel, Field

from stylefix.core.errors import (
    ConflictsDetectedError,
    RemovalError,
)
from stylefix.core.log import logger
from stylefix.fixer.scanner import file_exists, iter_directories
from stylefix.fixer.style import (
    CONVENTION_DIRS,
    KNOWN_STYLE_CONFLICTS,
    ConflictPair,
    Style,
)


class StyleConflict(BaseModel):
    """Both files of a pair found in one directory."""

    directory: Path
    relative_path: str = Field(
        description="Directory relative to the project root ('.' for root)"
    )
    pair: ConflictPair

    def describe(self) -> str:
        return (
            f"{self.relative_path}: both {self.pair.go_zero} "
            f"and {self.pair.gozero} exist"
        )


class CleanupResult(BaseModel):
    """What a cleanup pass did."""

    style: Style
    removed: list[Path] = Field(default_factory=list)
    directories_scanned: int = 0


def _pair_in(directory: Path, pair: ConflictPair) -> bool:
    return (
        file_exists(directory / pair.go_zero)
        and file_exists(directory / pair.gozero)
    )


def _remove(path: Path) -> bool:
    """Delete path, tolerating it vanishing underneath us.

    Returns:
        True if this call removed the file

    Raises:
        RemovalError: If the file exists but cannot be removed
    """
    if not file_exists(path):
        logger.debug("Conflicting file already gone: {path}", path=str(path))
        return False
    try:
        path.unlink()
    except FileNotFoundError:
        logger.debug(
            "Conflicting file removed concurrently: {path}", path=str(path)
        )
        return False
    except OSError as e:
        raise RemovalError(path, e.strerror or str(e)) from e
    return True


def cleanup_style_conflicts(
    project_path: Path | str,
    style: Style | str,
    conflicts: Sequence[ConflictPair] = KNOWN_STYLE_CONFLICTS,
) -> CleanupResult:
    """Remove the unwanted half of every co-located conflict pair.

    Args:
        project_path: Root of the generated project
        style: Style whose filenames are kept
        conflicts: Known conflict pairs

    Returns:
        CleanupResult listing the removed files

    Raises:
        UnknownStyleError: If style is not a recognized tag
        RemovalError: If a confirmed file cannot be deleted; files
            already deleted stay deleted
        TraversalError: If a directory cannot be read
    """
    style = Style.parse(style)
    result = CleanupResult(style=style)

    with logger.span(
        "Cleaning up style conflicts",
        project=str(project_path),
        style=style.value,
    ):
        for directory in iter_directories(project_path):
            result.directories_scanned += 1
            logger.spew(
                "Checking directory {directory}", directory=str(directory)
            )

            for pair in conflicts:
                if not _pair_in(directory, pair):
                    continue
                victim = directory / pair.drop(style)
                if _remove(victim):
                    logger.info(
                        "Removed conflicting file {path} (kept {kept})",
                        path=str(victim),
                        kept=pair.keep(style),
                    )
                    result.removed.append(victim)

        logger.debug(
            "Style cleanup finished",
            removed=len(result.removed),
            directories=result.directories_scanned,
        )
    return result


def detect_existing_style(
    project_path: Path | str,
    conflicts: Sequence[ConflictPair] = KNOWN_STYLE_CONFLICTS,
    convention_dirs: Iterable[str] = CONVENTION_DIRS,
) -> Style | None:
    """Guess the style a project already uses.

    Only the conventional directories (internal/svc, internal/handler,
    internal/logic by default) are probed, not the whole tree. The
    first file found wins, checking the go_zero name before the gozero
    name in each directory.

    Returns:
        The detected Style, or None if no probe file exists
    """
    root = Path(project_path)
    convention_dirs = list(convention_dirs)

    for pair in conflicts:
        for rel in convention_dirs:
            directory = root / rel
            if file_exists(directory / pair.go_zero):
                return Style.GO_ZERO
            if file_exists(directory / pair.gozero):
                return Style.GOZERO

    return None


def suggest_style(
    project_path: Path | str,
    default_style: Style | str,
    conflicts: Sequence[ConflictPair] = KNOWN_STYLE_CONFLICTS,
    convention_dirs: Iterable[str] = CONVENTION_DIRS,
) -> Style:
    """Detected style of the project, falling back to default_style."""
    detected = detect_existing_style(project_path, conflicts, convention_dirs)
    if detected is not None:
        return detected
    return Style.parse(default_style)


def find_style_conflicts(
    project_path: Path | str,
    conflicts: Sequence[ConflictPair] = KNOWN_STYLE_CONFLICTS,
) -> list[StyleConflict]:
    """List every directory/pair still in conflict. Read-only."""
    found = []
    for directory in iter_directories(project_path):
        for pair in conflicts:
            if _pair_in(directory, pair):
                found.append(StyleConflict(
                    directory=directory,
                    relative_path=os.path.relpath(directory, project_path),
                    pair=pair,
                ))
    return found


def validate_no_style_conflicts(
    project_path: Path | str,
    conflicts: Sequence[ConflictPair] = KNOWN_STYLE_CONFLICTS,
) -> None:
    """Fail if any directory still holds both files of a pair.

    The whole tree is audited before failing.

    Raises:
        ConflictsDetectedError: Listing every conflict, one per line
        TraversalError: If a directory cannot be read
    """
    found = find_style_conflicts(project_path, conflicts)
    if found:
        raise ConflictsDetectedError(found)


__all__ = [
    "StyleConflict",
    "CleanupResult",
    "cleanup_style_conflicts",
    "detect_existing_style",
    "suggest_style",
    "find_style_conflicts",
    "validate_no_style_conflicts",
]
