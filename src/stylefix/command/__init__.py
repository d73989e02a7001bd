"""CLI command modules for stylefix."""

from stylefix.command.cleanup import CleanupCommand
from stylefix.command.detect import DetectCommand, SuggestCommand
from stylefix.command.validate import ValidateCommand

__all__ = [
    "CleanupCommand",
    "DetectCommand",
    "SuggestCommand",
    "ValidateCommand",
]
