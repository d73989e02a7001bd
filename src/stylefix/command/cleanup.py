"""Cleanup command - delete the unwanted half of conflicting files."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from stylefix.core.errors import ConflictsDetectedError, StyleFixError
from stylefix.core.log import logger
from stylefix.fixer.conflicts import (
    cleanup_style_conflicts,
    suggest_style,
    validate_no_style_conflicts,
)
from stylefix.fixer.style import Style

if TYPE_CHECKING:
    from stylefix.core.config import State


class CleanupCommand(BaseModel):
    """Remove files whose name belongs to the unwanted naming style.

    In every directory of the project holding both a go_zero file
    (service_context.go) and its gozero twin (servicecontext.go), the
    file of the other style is deleted. Deletion is permanent.
    Without --style, the style already used by the project is kept,
    falling back to config.style.default_style.
    """

    project: Path = Field(
        default=Path("."),
        description="Root directory of the generated project",
    )
    style: Style | None = Field(
        default=None,
        description="Style to keep: 'go_zero' or 'gozero'",
    )
    verify: bool = Field(
        default=True,
        description="Validate the tree after cleanup",
    )

    def run(self, state: State) -> int:
        """Run cleanup.

        Returns:
            Exit code (0=success, 1=failure)
        """
        settings = state.config.style
        style = self.style or suggest_style(
            self.project,
            settings.default_style,
            settings.conflicts,
            settings.convention_dirs,
        )

        try:
            result = cleanup_style_conflicts(
                self.project, style, settings.conflicts
            )
            if self.verify:
                validate_no_style_conflicts(self.project, settings.conflicts)
        except ConflictsDetectedError as e:
            for conflict in e.conflicts:
                logger.error(
                    "Unresolved style conflict: {conflict}",
                    conflict=conflict.describe(),
                )
            return 1
        except StyleFixError as e:
            logger.error("Cleanup failed: {error}", error=str(e))
            return 1

        logger.info(
            f"Kept {result.style} style, removed "
            f"{len(result.removed)} file(s) across "
            f"{result.directories_scanned} directories"
        )
        return 0
