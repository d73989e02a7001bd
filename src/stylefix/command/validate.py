"""Validate command - audit the tree for unresolved conflicts."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from stylefix.core.errors import ConflictsDetectedError, StyleFixError
from stylefix.core.log import logger
from stylefix.fixer.conflicts import validate_no_style_conflicts

if TYPE_CHECKING:
    from stylefix.core.config import State


class ValidateCommand(BaseModel):
    """Fail if any directory holds files of both naming styles.

    Read-only. Every conflict in the tree is reported, not just the
    first one.
    """

    project: Path = Field(
        default=Path("."),
        description="Root directory of the generated project",
    )

    def run(self, state: State) -> int:
        try:
            validate_no_style_conflicts(
                self.project, state.config.style.conflicts
            )
        except ConflictsDetectedError as e:
            logger.error(
                f"{len(e.conflicts)} style conflict(s) found",
                project=str(self.project),
            )
            for conflict in e.conflicts:
                logger.error(
                    "Style conflict: {conflict}",
                    conflict=conflict.describe(),
                )
            return 1
        except StyleFixError as e:
            logger.error("Validation failed: {error}", error=str(e))
            return 1

        logger.info("No style conflicts", project=str(self.project))
        return 0
