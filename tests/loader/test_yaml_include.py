"""Tests for layered YAML loading and the include: directive."""

import sys

import pytest

from stylefix.core import yaml_settings
from stylefix.core.config import State
from stylefix.core.yaml_settings import YamlWithIncludesSettingsSource


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """No user config, no stray --include, cwd without stylefix.yaml."""
    user_dir = tmp_path / "user-config"
    monkeypatch.setattr(
        yaml_settings, "user_config_dir",
        lambda *args, **kwargs: str(user_dir),
    )
    monkeypatch.setattr(sys, "argv", ["stylefix"])
    monkeypatch.chdir(tmp_path)
    return user_dir


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


def test_package_defaults_load():
    data = YamlWithIncludesSettingsSource(State)()

    style = data["config"]["style"]
    assert style["default_style"] == "gozero"
    assert style["conflicts"] == [
        {"go_zero": "service_context.go", "gozero": "servicecontext.go"}
    ]
    assert style["convention_dirs"] == [
        "internal/svc", "internal/handler", "internal/logic",
    ]


def test_project_config_overrides_defaults(tmp_path):
    _write(tmp_path / "stylefix.yaml", """
config:
  style:
    default_style: go_zero
""")

    data = YamlWithIncludesSettingsSource(State)()

    assert data["config"]["style"]["default_style"] == "go_zero"
    # Sibling keys from the defaults survive the deep merge
    assert data["config"]["style"]["convention_dirs"][0] == "internal/svc"


def test_user_config_below_project_config(tmp_path, isolated):
    _write(isolated / "stylefix.yaml", """
config:
  run_name: from-user
  style:
    default_style: go_zero
""")
    _write(tmp_path / "stylefix.yaml", """
config:
  style:
    default_style: gozero
""")

    data = YamlWithIncludesSettingsSource(State)()

    assert data["config"]["run_name"] == "from-user"
    assert data["config"]["style"]["default_style"] == "gozero"


def test_include_directive_merges(tmp_path):
    _write(tmp_path / "pairs.yaml", """
config:
  style:
    conflicts:
      - go_zero: user_logic.go
        gozero: userlogic.go
""")
    config = _write(tmp_path / "custom.yaml", """
include: pairs.yaml
config:
  style:
    default_style: go_zero
""")

    data = YamlWithIncludesSettingsSource(State, yaml_file=str(config))()

    assert data["config"]["style"]["conflicts"] == [
        {"go_zero": "user_logic.go", "gozero": "userlogic.go"}
    ]
    assert data["config"]["style"]["default_style"] == "go_zero"


def test_including_file_wins_over_included(tmp_path):
    _write(tmp_path / "base.yaml", """
config:
  run_name: base
""")
    config = _write(tmp_path / "top.yaml", """
include: [base.yaml]
config:
  run_name: top
""")

    data = YamlWithIncludesSettingsSource(State, yaml_file=str(config))()

    assert data["config"]["run_name"] == "top"


def test_circular_include_detected(tmp_path):
    _write(tmp_path / "a.yaml", "include: b.yaml\n")
    config = _write(tmp_path / "b.yaml", "include: a.yaml\n")

    with pytest.raises(ValueError, match="Circular include"):
        YamlWithIncludesSettingsSource(State, yaml_file=str(config))


def test_missing_include_file_raises(tmp_path):
    config = _write(tmp_path / "config.yaml", "include: nonexistent.yaml\n")

    with pytest.raises(FileNotFoundError):
        YamlWithIncludesSettingsSource(State, yaml_file=str(config))


def test_cli_include_has_highest_priority(tmp_path, monkeypatch):
    _write(tmp_path / "stylefix.yaml", """
config:
  run_name: project
""")
    override = _write(tmp_path / "override.yaml", """
config:
  run_name: cli
""")
    monkeypatch.setattr(sys, "argv", ["stylefix", "--include", str(override)])

    data = YamlWithIncludesSettingsSource(State)()

    assert data["config"]["run_name"] == "cli"
