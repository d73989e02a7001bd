"""Resolve go_zero/gozero file naming collisions in go-zero projects."""

from stylefix.core.errors import (
    ConflictsDetectedError,
    RemovalError,
    StyleFixError,
    TraversalError,
    UnknownStyleError,
)
from stylefix.fixer import (
    CONVENTION_DIRS,
    KNOWN_STYLE_CONFLICTS,
    CleanupResult,
    ConflictPair,
    Style,
    StyleConflict,
    cleanup_style_conflicts,
    detect_existing_style,
    find_style_conflicts,
    suggest_style,
    validate_no_style_conflicts,
)

__all__ = [
    "CONVENTION_DIRS",
    "KNOWN_STYLE_CONFLICTS",
    "CleanupResult",
    "ConflictPair",
    "ConflictsDetectedError",
    "RemovalError",
    "Style",
    "StyleConflict",
    "StyleFixError",
    "TraversalError",
    "UnknownStyleError",
    "cleanup_style_conflicts",
    "detect_existing_style",
    "find_style_conflicts",
    "suggest_style",
    "validate_no_style_conflicts",
]
