"""Test log level filtering and file sink formats."""

import re

import pytest

from stylefix.core.log import (
    ConsoleSink,
    FileSink,
    LogfireSink,
    setup_logger,
)


def _file_logger(tmp_path, name, **file_kwargs):
    log_file = tmp_path / name
    logger = setup_logger(
        log_root=tmp_path,
        run_name="test",
        console=ConsoleSink(enabled=False),
        file=FileSink(enabled=True, path=str(log_file), **file_kwargs),
        logfire=LogfireSink(enabled=False),
    )
    return logger, log_file


def test_spew_level_includes_all(tmp_path):
    logger, log_file = _file_logger(tmp_path, "spew.log", level="spew")

    logger.spew("SPEW message")
    logger.trace("TRACE message")
    logger.debug("DEBUG message")
    logger.info("INFO message")
    logger.close()

    content = log_file.read_text()
    for word in ("SPEW", "TRACE", "DEBUG", "INFO"):
        assert f"{word} message" in content


def test_info_level_filters_noise(tmp_path):
    logger, log_file = _file_logger(tmp_path, "info.log", level="info")

    logger.spew("Checking directory")
    logger.debug("Conflicting file already gone")
    logger.info("Removed conflicting file")
    logger.error("Cleanup failed")
    logger.close()

    content = log_file.read_text()
    assert "Checking directory" not in content
    assert "already gone" not in content
    assert "Removed conflicting file" in content
    assert "Cleanup failed" in content


def test_default_json_format(tmp_path):
    logger, log_file = _file_logger(tmp_path, "default.log")

    logger.info("Test message")
    logger.close()

    content = log_file.read_text()
    assert content.startswith("{")
    assert '"name": "Test message"' in content


def test_text_format_with_attributes(tmp_path):
    template = "{timestamp:%Y-%m-%d %H:%M:%S.%f} [{level}] {location} {message}"
    logger, log_file = _file_logger(
        tmp_path, "text.log", format_template=template
    )

    logger.info("Removed conflicting file", path="internal/svc/servicecontext.go")
    logger.close()

    line = log_file.read_text().strip()
    assert re.match(
        r'^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d+ \[info\] '
        r'.+\.py:\d+ Removed conflicting file',
        line,
    ), line
    assert "path='internal/svc/servicecontext.go'" in line


def test_escape_special_characters(tmp_path):
    logger, log_file = _file_logger(
        tmp_path,
        "escaped.log",
        format_template="{message}",
        escape_special_characters=True,
    )

    logger.info("style conflicts detected:\ninternal/svc: both exist")
    logger.close()

    lines = log_file.read_text().splitlines()
    assert len(lines) == 1
    assert lines[0].startswith(
        "style conflicts detected:\\ninternal/svc: both exist"
    )


def test_invalid_template_field(tmp_path):
    logger, log_file = _file_logger(
        tmp_path, "bad.log", format_template="{nonsense} {message}"
    )

    logger.info("Test message")
    logger.close()

    assert "ERROR: Invalid template field" in log_file.read_text()


def test_file_path_template_expands(tmp_path):
    logger = setup_logger(
        log_root=tmp_path,
        run_name="cleanup",
        console=ConsoleSink(enabled=False),
        file=FileSink(enabled=True),
        logfire=LogfireSink(enabled=False),
    )
    logger.info("hello")
    logger.close()

    assert (tmp_path / "cleanup" / "stylefix.log").is_file()


@pytest.mark.parametrize("level", ["debug", "warn"])
def test_sink_inherits_logger_level(level):
    from stylefix.core.log import Logger

    logger = Logger(level=level)

    assert logger.console.level == level
    assert logger.file.level == level
