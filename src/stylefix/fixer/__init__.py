"""go_zero/gozero naming conflict detection and cleanup."""

from stylefix.fixer.conflicts import (
    CleanupResult,
    StyleConflict,
    cleanup_style_conflicts,
    detect_existing_style,
    find_style_conflicts,
    suggest_style,
    validate_no_style_conflicts,
)
from stylefix.fixer.scanner import file_exists, iter_directories
from stylefix.fixer.style import (
    CONVENTION_DIRS,
    KNOWN_STYLE_CONFLICTS,
    ConflictPair,
    Style,
)

__all__ = [
    "CONVENTION_DIRS",
    "KNOWN_STYLE_CONFLICTS",
    "CleanupResult",
    "ConflictPair",
    "Style",
    "StyleConflict",
    "cleanup_style_conflicts",
    "detect_existing_style",
    "file_exists",
    "find_style_conflicts",
    "iter_directories",
    "suggest_style",
    "validate_no_style_conflicts",
]
