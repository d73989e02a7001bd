"""End-to-end tests for the stylefix command line."""

import importlib
import sys
import warnings
from pathlib import Path

import pytest
from pydantic_settings import CliApp

from stylefix import cli
from stylefix.cli import CliState, main
from stylefix.core import yaml_settings

SNAKE = "service_context.go"
FLAT = "servicecontext.go"


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Only package defaults: no user or project config, plain argv."""
    monkeypatch.setattr(
        yaml_settings, "user_config_dir",
        lambda *args, **kwargs: str(tmp_path / "user-config"),
    )
    monkeypatch.setattr(sys, "argv", ["stylefix"])
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def conflicted(project, touch):
    touch(project / "internal" / "svc" / SNAKE)
    touch(project / "internal" / "svc" / FLAT)
    return project


def _run(args):
    with pytest.raises(SystemExit) as exc_info:
        CliApp.run(CliState, cli_args=args)
    return exc_info.value.code


def test_validate_prints_conflicting_directory(conflicted, capsys):
    code = _run(["validate", "--project", str(conflicted)])

    output = "".join(capsys.readouterr())
    assert code == 1
    assert str(Path("internal") / "svc") in output
    assert f"both {SNAKE} and {FLAT} exist" in output


def test_validate_clean_project(project, capsys):
    assert _run(["validate", "--project", str(project)]) == 0
    assert "No style conflicts" in "".join(capsys.readouterr())


def test_cleanup_prints_removed_file(conflicted, capsys):
    code = _run(["cleanup", "--project", str(conflicted), "--style", "gozero"])

    output = "".join(capsys.readouterr())
    assert code == 0
    assert str(conflicted / "internal" / "svc" / SNAKE) in output
    assert not (conflicted / "internal" / "svc" / SNAKE).exists()
    assert (conflicted / "internal" / "svc" / FLAT).exists()


def test_detect_prints_style(project, touch, capsys):
    touch(project / "internal" / "handler" / SNAKE)

    assert _run(["detect", "--project", str(project)]) == 0
    assert "Detected style: go_zero" in "".join(capsys.readouterr())


def test_validate_subcommand_keeps_its_name():
    field = CliState.model_fields["validate_"]

    assert field.alias == "validate"
    assert "validate" not in CliState.model_fields


def test_cli_state_defines_without_shadowing_warning():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        importlib.reload(cli)

    shadowing = [w for w in caught if "shadows an attribute" in str(w.message)]
    assert shadowing == []


def test_unknown_style_reports_cleanly(conflicted, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["cleanup", "--project", str(conflicted), "--style", "bogus"])

    err = capsys.readouterr().err
    assert exc_info.value.code == 1
    assert err.startswith("stylefix: ")
    assert "style" in err
    assert "Traceback" not in err
    # Nothing was deleted
    assert (conflicted / "internal" / "svc" / SNAKE).exists()
    assert (conflicted / "internal" / "svc" / FLAT).exists()
