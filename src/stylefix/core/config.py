"""Application configuration."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import platformdirs
from pydantic import ConfigDict, Field, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from stylefix.core.base import BaseConfig
from stylefix.core.log import Logger
from stylefix.core.yaml_settings import YamlWithIncludesSettingsSource
from stylefix.fixer.style import (
    CONVENTION_DIRS,
    KNOWN_STYLE_CONFLICTS,
    ConflictPair,
    Style,
)

# Modules reachable from templates in string settings, e.g.
# {platformdirs.user_state_dir}, {Path.home}, {os.getcwd}
TEMPLATE_NAMESPACE = {
    'os': os,
    'platformdirs': platformdirs,
    'Path': Path,
}

_TEMPLATE = re.compile(r'\{([A-Za-z][A-Za-z_]*(?:\.[A-Za-z_]+)+)\}')

# Bound on templates that resolve to further templates
_MAX_TEMPLATE_DEPTH = 8


class StyleConfig(BaseConfig):
    """Which files collide and where to look for them."""

    default_style: Style = Field(
        default=Style.GOZERO,
        description=(
            "Style used when none is given and none can be detected: "
            "'go_zero' or 'gozero'"
        ),
    )
    conflicts: list[ConflictPair] = Field(
        default_factory=lambda: list(KNOWN_STYLE_CONFLICTS),
        description="Filename pairs that must not share a directory",
    )
    convention_dirs: list[str] = Field(
        default_factory=lambda: list(CONVENTION_DIRS),
        description=(
            "Directories, relative to the project root, probed when "
            "detecting the existing style"
        ),
    )

    @field_validator("default_style", mode="before")
    @classmethod
    def _parse_style(cls, value):
        return Style.parse(value)


class Config(BaseConfig):
    """Configuration loaded from YAML/env/CLI."""

    logger: Logger = Field(
        default=None,
        description="Logger configuration and runtime instance"
    )
    style: StyleConfig = Field(
        default_factory=StyleConfig,
        description="Conflict table and style detection settings"
    )
    log_level: str = Field(
        default="info",
        alias="log-level",
        description=(
            "Default log level: 'spew', 'trace', 'debug', 'info', "
            "'warn', 'error', 'fatal'"
        ),
    )
    log_root: Path = Field(
        default_factory=(
            lambda: Path(platformdirs.user_state_dir("stylefix"))
        ),
        description="Root directory for log files",
    )
    run_name: str = Field(
        default="stylefix",
        description="Name of this run; used in log paths and service name",
    )

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode='after')
    def _setup_logger(self) -> 'Config':
        """Install the global logger from the loaded settings."""
        from stylefix.core.log import setup_logger
        from stylefix.core.yaml_settings import _cleanup_bootstrap_logger

        if self.logger is None:
            self.logger = Logger(level=self.log_level)

        self.logger = setup_logger(
            log_root=self.log_root,
            run_name=self.run_name,
            console=self.logger.console,
            file=self.logger.file,
            logfire=self.logger.logfire,
            level=self.logger.level,
        )

        _cleanup_bootstrap_logger()
        return self


class State(BaseSettings):
    """Everything a command needs, loaded from all config sources.

    Sources, highest priority first: constructor arguments, YAML
    layers, .env, environment (STYLEFIX_CONFIG__STYLE__DEFAULT_STYLE),
    secret files.
    """

    config: Config = Field(
        default_factory=Config,
        description="Application configuration (from YAML/env/CLI)"
    )
    include: list[str] | None = Field(
        default=None,
        description=(
            "Additional YAML files to merge on top of the defaults. "
            "Use --include on the CLI or include: in YAML."
        ),
    )

    model_config = SettingsConfigDict(
        yaml_file="stylefix.yaml",
        env_file=".env",
        env_prefix="STYLEFIX_",
        env_nested_delimiter="__",
        cli_parse_args=True,
        cli_implicit_flags=True,
        cli_use_class_docs_for_groups=True,
        extra='ignore'
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            YamlWithIncludesSettingsSource(settings_cls),
            dotenv_settings,
            env_settings,
            file_secret_settings,
        )

    @model_validator(mode="before")
    @classmethod
    def substitute_templates(cls, data: Any) -> Any:
        """Expand {module.attr} and {config.path} templates in strings.

        Runs on the merged raw settings, before Config is built, so the
        logger set up by Config already sees expanded paths.

        Examples:
            "{platformdirs.user_state_dir}" -> "~/.local/state/stylefix"
            "{config.log_root}/{run_name}.log" -> "/var/log/sf/{run_name}.log"

        Single-word placeholders ({run_name}, {level}) are left for
        the log sinks to fill in.
        """
        if not isinstance(data, dict):
            return data
        return cls._substitute_value(data, data, 0)

    @classmethod
    def _substitute_value(cls, value: Any, root: dict, depth: int) -> Any:
        if isinstance(value, str):
            return cls._substitute_string(value, root, depth)
        if isinstance(value, Path):
            return Path(cls._substitute_string(str(value), root, depth))
        if isinstance(value, dict):
            return {
                key: cls._substitute_value(item, root, depth)
                for key, item in value.items()
            }
        if isinstance(value, list):
            return [cls._substitute_value(item, root, depth) for item in value]
        return value

    @classmethod
    def _substitute_string(cls, value: str, root: dict, depth: int) -> str:
        if depth >= _MAX_TEMPLATE_DEPTH:
            return value

        def replace_template(match):
            parts = match.group(1).split(".")

            if parts[0] in TEMPLATE_NAMESPACE:
                obj = TEMPLATE_NAMESPACE[parts[0]]
                try:
                    for part in parts[1:]:
                        obj = getattr(obj, part)
                    if callable(obj):
                        try:
                            obj = obj('stylefix', appauthor=False)
                        except TypeError:
                            obj = obj()
                except (AttributeError, TypeError):
                    return match.group(0)
                return str(obj)

            # Reference to another setting in the raw data
            obj = root
            for part in parts:
                if not isinstance(obj, dict) or part not in obj:
                    return match.group(0)
                obj = obj[part]
            if isinstance(obj, (dict, list)) or obj is None:
                return match.group(0)
            return cls._substitute_string(str(obj), root, depth + 1)

        return _TEMPLATE.sub(replace_template, value)


__all__ = ["State", "Config", "StyleConfig"]
