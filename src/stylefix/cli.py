#!/usr/bin/env python3
"""stylefix CLI - resolve go_zero/gozero file naming collisions."""

import sys

from pydantic import Field, ValidationError
from pydantic_settings import CliApp, CliSubCommand, get_subcommand

from stylefix.command.cleanup import CleanupCommand
from stylefix.command.detect import DetectCommand, SuggestCommand
from stylefix.command.validate import ValidateCommand
from stylefix.core.config import State
from stylefix.core.log import logger


class CliState(State):
    """Resolve duplicate files left by mixing go-zero naming styles.

    goctl's go_zero style writes service_context.go while the gozero
    style writes servicecontext.go; regenerating a project in the other
    style leaves both and breaks the build with duplicate declarations.

    Configuration sources (in priority order):
    1. Command-line arguments (--config.style.default_style go_zero)
    2. --include files, ./stylefix.yaml, user config, package defaults
    3. .env file
    4. Environment variables
       (STYLEFIX_CONFIG__STYLE__DEFAULT_STYLE=go_zero)
    """

    cleanup: CliSubCommand[CleanupCommand]
    detect: CliSubCommand[DetectCommand]
    suggest: CliSubCommand[SuggestCommand]
    # BaseModel.validate exists, so the field needs another name
    validate_: CliSubCommand[ValidateCommand] = Field(alias="validate")

    def cli_cmd(self):
        """Dispatch to the active subcommand, or show help."""
        subcommand = get_subcommand(self, is_required=False)

        if subcommand is None:
            CliApp.run(CliState, cli_args=['--help'])
            sys.exit(1)

        # Closing the logger flushes any file sink before exit
        with logger:
            raise SystemExit(subcommand.run(self))


def main(cli_args: list[str] | None = None):
    """Main entry point for CLI.

    Invalid arguments (e.g. an unknown --style) are reported on one
    stderr line per error with exit code 1.
    """
    try:
        CliApp.run(CliState, cli_args=cli_args)
    except ValidationError as e:
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            print(f"stylefix: {location}: {error['msg']}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
