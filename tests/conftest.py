"""Pytest configuration and fixtures for stylefix tests."""

import sys
import tempfile
from pathlib import Path

import pytest

from stylefix.core.log import ConsoleSink, setup_logger


@pytest.fixture(autouse=True, scope="session")
def configure_logging():
    """Console-only debug logging; nothing is sent to logfire.dev."""
    setup_logger(
        log_root=Path(tempfile.gettempdir()) / "stylefix-tests",
        run_name="test",
        console=ConsoleSink(level="debug"),
    )


@pytest.fixture
def test_state():
    """Load a full State without pytest's argv reaching the CLI parser."""
    from stylefix.core.config import State

    old_argv = sys.argv
    sys.argv = ['stylefix']

    try:
        return State()
    finally:
        sys.argv = old_argv


@pytest.fixture
def project(tmp_path):
    """A go-zero project layout with no generated files yet."""
    for rel in ("internal/svc", "internal/handler", "internal/logic"):
        (tmp_path / rel).mkdir(parents=True)
    return tmp_path


@pytest.fixture
def touch():
    """Create a file (and its parents) with placeholder Go source."""
    def _touch(path: Path, content: str = "package svc\n") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path
    return _touch
