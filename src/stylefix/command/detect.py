"""Detect and suggest commands - report the project's naming style."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from stylefix.core.log import logger
from stylefix.fixer.conflicts import detect_existing_style, suggest_style
from stylefix.fixer.style import Style

if TYPE_CHECKING:
    from stylefix.core.config import State

# Exit code when no style could be detected
UNDETERMINED = 2


class DetectCommand(BaseModel):
    """Report which naming style the project already uses.

    Only the conventional directories (config.style.convention_dirs)
    are probed. Exits with 2 when neither style's files are present.
    """

    project: Path = Field(
        default=Path("."),
        description="Root directory of the generated project",
    )

    def run(self, state: State) -> int:
        settings = state.config.style
        detected = detect_existing_style(
            self.project, settings.conflicts, settings.convention_dirs
        )
        if detected is None:
            logger.warn(
                "Could not determine naming style", project=str(self.project)
            )
            return UNDETERMINED

        logger.info(f"Detected style: {detected}", project=str(self.project))
        return 0


class SuggestCommand(BaseModel):
    """Report the style to generate with: detected, else the default."""

    project: Path = Field(
        default=Path("."),
        description="Root directory of the generated project",
    )
    default: Style | None = Field(
        default=None,
        description=(
            "Fallback style; defaults to config.style.default_style"
        ),
    )

    def run(self, state: State) -> int:
        settings = state.config.style
        suggested = suggest_style(
            self.project,
            self.default or settings.default_style,
            settings.conflicts,
            settings.convention_dirs,
        )
        logger.info(f"Suggested style: {suggested}", project=str(self.project))
        return 0
