"""Naming styles and the table of filenames they collide on."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from stylefix.core.errors import UnknownStyleError


class Style(str, Enum):
    """File naming convention of a go-zero code generator run.

    GO_ZERO writes snake_case names (service_context.go), GOZERO
    writes flat names (servicecontext.go).
    """

    GO_ZERO = "go_zero"
    GOZERO = "gozero"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Style | str) -> Style:
        """Coerce a tag into a Style.

        Raises:
            UnknownStyleError: If value names neither style
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise UnknownStyleError(value) from e


class ConflictPair(BaseModel):
    """Two filenames that declare the same thing in either style."""

    model_config = ConfigDict(frozen=True)

    go_zero: str = Field(
        description="snake_case name, e.g. service_context.go"
    )
    gozero: str = Field(
        description="Flat name, e.g. servicecontext.go"
    )

    def name_for(self, style: Style) -> str:
        match style:
            case Style.GO_ZERO:
                return self.go_zero
            case Style.GOZERO:
                return self.gozero
        raise UnknownStyleError(style)

    def keep(self, style: Style) -> str:
        """Filename that survives cleanup for the given style."""
        return self.name_for(style)

    def drop(self, style: Style) -> str:
        """Filename that cleanup removes for the given style."""
        match style:
            case Style.GO_ZERO:
                return self.gozero
            case Style.GOZERO:
                return self.go_zero
        raise UnknownStyleError(style)


KNOWN_STYLE_CONFLICTS: tuple[ConflictPair, ...] = (
    ConflictPair(go_zero="service_context.go", gozero="servicecontext.go"),
)

# Probe directories for style detection, relative to the project root
CONVENTION_DIRS: tuple[str, ...] = (
    "internal/svc",
    "internal/handler",
    "internal/logic",
)


__all__ = [
    "Style",
    "ConflictPair",
    "KNOWN_STYLE_CONFLICTS",
    "CONVENTION_DIRS",
]
