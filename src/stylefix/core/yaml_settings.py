"""YAML configuration loading with include directive support."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import yaml
from platformdirs import user_config_dir
from pydantic_settings import BaseSettings, YamlConfigSettingsSource

CONFIG_FILENAME = "stylefix.yaml"

# Used only while configuration loads, before the real logger exists
_bootstrap_logger = None


def _get_bootstrap_logger():
    global _bootstrap_logger
    if _bootstrap_logger is None:
        from stylefix.core.log import ConsoleSink, Logger
        _bootstrap_logger = Logger(console=ConsoleSink(level="warn"))
        _bootstrap_logger.setup(log_root=Path.home(), run_name="bootstrap")
    return _bootstrap_logger


def _cleanup_bootstrap_logger():
    """Close the bootstrap logger once Config has installed the real one."""
    global _bootstrap_logger
    if _bootstrap_logger:
        _bootstrap_logger.close()
        _bootstrap_logger = None


def _cli_includes(argv: list[str]) -> list[str]:
    """Pull ``--include FILE`` values out of argv."""
    includes = []
    i = 1
    while i < len(argv):
        if argv[i] == "--include" and i + 1 < len(argv):
            includes.append(argv[i + 1])
            i += 1
        i += 1
    return includes


class YamlWithIncludesSettingsSource(YamlConfigSettingsSource):
    """YAML settings source that layers several files.

    Merge order (later wins):
        package defaults < user config < ./stylefix.yaml < --include
    Each file may pull in others with an ``include:`` key.
    """

    def __init__(
        self, settings_cls: type[BaseSettings], yaml_file=None
    ):
        """Initialize with CLI include processing.

        Args:
            settings_cls: The Settings class being initialized
            yaml_file: Optional override for the project config path
        """
        includes = _cli_includes(sys.argv)

        base = yaml_file or settings_cls.model_config.get("yaml_file")
        if base and includes:
            yaml_file = (
                [base] if isinstance(base, (str, os.PathLike)) else list(base)
            ) + includes
        elif includes:
            yaml_file = includes
        else:
            yaml_file = base

        super().__init__(settings_cls, yaml_file)

    def _read_files(self, files, deep_merge: bool = True):  # noqa: ARG002
        """Load and deep-merge every configuration layer that exists.

        Layers are always deep-merged, whatever deep_merge says.

        Args:
            files: Project config and CLI include path(s)

        Returns:
            Merged dictionary
        """
        files_to_load = [
            Path(__file__).parent.parent / "defaults" / "default.yaml",
            Path(user_config_dir("stylefix", appauthor=False))
            / CONFIG_FILENAME,
        ]

        if files:
            if isinstance(files, (str, os.PathLike)):
                files = [files]
            files_to_load.extend(Path(f).expanduser() for f in files)

        result = {}
        for file_path in files_to_load:
            if file_path.is_file():
                with _get_bootstrap_logger().span(
                    "Configuration loading",
                    file=str(file_path),
                ):
                    data = self._load_file_recursive(file_path, set())
                    result = self._deep_merge(result, data)
            else:
                _get_bootstrap_logger().debug(
                    "Configuration file not found (skipping)",
                    file=str(file_path),
                )

        return result

    def _load_file_recursive(
        self, filepath: Path, visited: set[Path]
    ) -> dict:
        """Load a YAML file, resolving its include: entries first.

        Keys in the including file override keys from included files.

        Raises:
            ValueError: If an include cycle is found
        """
        filepath = filepath.resolve()
        if filepath in visited:
            raise ValueError(f"Circular include: {filepath}")
        visited.add(filepath)

        with open(filepath, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if "include" in data:
            includes = data.pop("include")
            if isinstance(includes, str):
                includes = [includes]

            for inc in includes:
                inc_path = self._resolve_path(inc, filepath)
                with _get_bootstrap_logger().span(
                    f"Including {inc_path.name}",
                    included_from=str(filepath),
                ):
                    inc_data = self._load_file_recursive(
                        inc_path, visited.copy()
                    )
                    data = self._deep_merge(inc_data, data)

        return data

    @staticmethod
    def _resolve_path(include_path: str, relative_to: Path) -> Path:
        path = Path(include_path).expanduser()
        if path.is_absolute():
            return path
        return (relative_to.parent / path).resolve()

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """Return base with override merged in; nested dicts merge."""
        result = base.copy()
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result
