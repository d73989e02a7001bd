"""Logfire-backed logger with pluggable output sinks."""

from __future__ import annotations

import contextlib
from abc import abstractmethod
from pathlib import Path
from typing import Any

from opentelemetry.proto.logs.v1 import logs_pb2
from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult
from pydantic import Field, PrivateAttr, model_validator

from stylefix.core.base import BaseConfig

_current_logger: Logger | None = None


class _LoggerProxy:
    """Stand-in imported by every module as ``logger``.

    Attribute access is forwarded to the logger installed by
    setup_logger(). Until then every call is a no-op (span() returns
    an empty context manager), so library code can log
    unconditionally.
    """

    def __getattr__(self, name):
        if _current_logger is None:
            if name == "span":
                return lambda *args, **kwargs: contextlib.nullcontext()

            def _noop(*args, **kwargs):  # noqa: ARG001
                pass
            return _noop
        return getattr(_current_logger, name)

    def __enter__(self):
        if _current_logger is None:
            return self
        return _current_logger.__enter__()

    def __exit__(self, *args):
        if _current_logger is None:
            return False
        return _current_logger.__exit__(*args)


logger = _LoggerProxy()


class LevelFilteringExporter(SpanExporter):
    """Drops spans below a minimum level before forwarding them."""

    # Level name -> OpenTelemetry severity number. Lower is noisier.
    _level_thresholds = {
        'spew': logs_pb2.SEVERITY_NUMBER_TRACE,
        'trace': logs_pb2.SEVERITY_NUMBER_TRACE3,
        'debug': logs_pb2.SEVERITY_NUMBER_DEBUG,
        'info': logs_pb2.SEVERITY_NUMBER_INFO,
        'warn': logs_pb2.SEVERITY_NUMBER_WARN,
        'error': logs_pb2.SEVERITY_NUMBER_ERROR,
        'fatal': logs_pb2.SEVERITY_NUMBER_FATAL,
    }

    def __init__(self, exporter: SpanExporter, min_level: str | None):
        """Wrap an exporter.

        Args:
            exporter: Exporter that receives the surviving spans
            min_level: spew, trace, debug, info, warn, error or fatal;
                unknown or missing values mean info
        """
        self._exporter = exporter
        self._min_severity = self._level_thresholds.get(
            (min_level or "info").lower(), logs_pb2.SEVERITY_NUMBER_INFO
        )

    def export(self, spans: list[ReadableSpan]) -> SpanExportResult:
        kept = [
            span for span in spans
            if (span.attributes or {}).get(
                'logfire.level_num', logs_pb2.SEVERITY_NUMBER_INFO
            ) >= self._min_severity
        ]
        if kept:
            return self._exporter.export(kept)
        return SpanExportResult.SUCCESS

    def shutdown(self) -> None:
        self._exporter.shutdown()

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        return self._exporter.force_flush(timeout_millis)


class Sink(BaseConfig):
    """One independent log destination.

    Sinks are BaseConfig models, so Logger.close() reaches each of
    them through the cleanup cascade.
    """

    enabled: bool = Field(default=True, description="Enable this sink")
    level: str | None = Field(
        default=None,
        description=(
            "Minimum level for this sink; None inherits Logger.level. "
            "Valid: spew, trace, debug, info, warn, error, fatal"
        )
    )
    escape_special_characters: bool = Field(
        default=False,
        description="Escape newlines/tabs so each record is one line"
    )
    format_template: str | None = Field(
        default=None,
        description="str.format template; None writes raw span JSON"
    )

    _processor: Any = PrivateAttr(default=None)

    @staticmethod
    def _escape_special_chars(text: str) -> str:
        return (text
            .replace('\\', '\\\\')
            .replace('\n', '\\n')
            .replace('\r', '\\r')
            .replace('\t', '\\t')
        )

    @staticmethod
    def _level_name(level_num: int) -> str:
        for name in (
            'fatal', 'error', 'warn', 'info', 'debug', 'trace', 'spew'
        ):
            if level_num >= LevelFilteringExporter._level_thresholds[name]:
                return name
        return "unknown"

    @classmethod
    def _extract_span_data(cls, span) -> dict:
        """Collect the fields a format_template may reference."""
        from datetime import UTC, datetime

        attrs = span.attributes or {}
        filepath = attrs.get("code.filepath", "")
        lineno = attrs.get("code.lineno", "")
        level_name = cls._level_name(
            attrs.get("logfire.level_num", logs_pb2.SEVERITY_NUMBER_INFO)
        )

        # RFC 5424 severity, facility=user(1)
        severity = {
            "warn": 4, "error": 3, "fatal": 3, "info": 6,
        }.get(level_name, 7)

        return {
            'timestamp': datetime.fromtimestamp(
                span.start_time / 1e9, tz=UTC
            ),
            'level': level_name,
            'message': attrs.get("logfire.msg", span.name),
            'filepath': filepath,
            'lineno': lineno,
            'location': f"{filepath}:{lineno}" if filepath else "",
            'function': attrs.get("code.function", ""),
            'priority': 8 * 1 + severity,
        }

    def _format_span(self, span) -> str:
        if not self.format_template:
            import os
            return span.to_json() + os.linesep

        data = self._extract_span_data(span)
        if self.escape_special_characters:
            data['message'] = self._escape_special_chars(data['message'])

        try:
            formatted = self.format_template.format(**data)
        except KeyError as e:
            return f"ERROR: Invalid template field {e}\n"

        # Keyword arguments passed to logger calls (path=..., style=...)
        attrs = span.attributes or {}
        skip_prefixes = ('otel.', 'telemetry.', 'service.', 'process.')
        skip_keys = {
            'code.filepath', 'code.lineno', 'code.function',
            'logfire.msg', 'logfire.level_num', 'logfire.span_type',
            'logfire.msg_template', 'logfire.json_schema',
        }
        extra = {
            k: v for k, v in attrs.items()
            if k not in skip_keys and not k.startswith(skip_prefixes)
        }
        if extra:
            formatted += " │ " + ' '.join(
                f"{k}={v!r}" for k, v in sorted(extra.items())
            )

        return formatted + '\n'

    @abstractmethod
    def create_processor(self, log_root: Path, run_name: str):
        """Build the span processor for this sink, or None.

        Args:
            log_root: Root directory for log files
            run_name: Name of the current run (e.g. the subcommand)
        """
        pass

    def close(self):
        if self._processor:
            with contextlib.suppress(Exception):
                self._processor.shutdown()


class ConsoleSink(Sink):
    """Terminal output rendered by logfire itself."""

    verbose: bool = Field(default=False, description="Show span details")
    colors: str = Field(
        default="auto",
        description="Color mode: auto, always, never"
    )

    def create_processor(self, log_root: Path, run_name: str):
        return None


class FileSink(Sink):
    """Append log records to a file."""

    enabled: bool = Field(default=False, description="Enable file logging")
    path: str = Field(
        default="{log_root}/{run_name}/stylefix.log",
        description="Log file path; {log_root} and {run_name} expand"
    )

    _file: Any = PrivateAttr(default=None)

    def create_processor(self, log_root: Path, run_name: str):
        from opentelemetry.sdk.trace.export import (
            BatchSpanProcessor,
            ConsoleSpanExporter,
        )

        log_path = Path(
            self.path.format(log_root=log_root, run_name=run_name)
        )
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # Line buffered; stays open until close()
        self._file = open(log_path, "a", buffering=1, encoding="utf-8")  # noqa: SIM115

        exporter = ConsoleSpanExporter(
            out=self._file,
            formatter=self._format_span
        )
        return BatchSpanProcessor(
            LevelFilteringExporter(exporter, self.level)
        )

    def close(self):
        """Flush pending spans, then close the file."""
        super().close()

        if self._file and not self._file.closed:
            with contextlib.suppress(OSError):
                self._file.flush()
                self._file.close()


class LogfireSink(Sink):
    """logfire.dev cloud export."""

    enabled: bool = Field(
        default=False,
        description="Send telemetry to logfire.dev"
    )
    token: str | None = Field(
        default=None,
        description="API token (or LOGFIRE_TOKEN env var)"
    )

    def create_processor(self, log_root: Path, run_name: str):
        return None


class Logger(BaseConfig):
    """Logger configuration plus the methods callers log through.

    Closing the logger closes every sink, flushing the file sink.
    """

    level: str = Field(
        default="info",
        description=(
            "Default level for sinks without their own. "
            "Valid: spew, trace, debug, info, warn, error, fatal"
        )
    )
    console: ConsoleSink = Field(default_factory=ConsoleSink)
    file: FileSink = Field(default_factory=FileSink)
    logfire: LogfireSink = Field(default_factory=LogfireSink)

    @model_validator(mode='after')
    def _cascade_level_to_sinks(self) -> 'Logger':
        for sink in (self.console, self.file):
            if sink.level is None:
                sink.level = self.level
        return self

    def _sinks(self) -> list[Sink]:
        return [self.console, self.file, self.logfire]

    def setup(self, log_root: Path, run_name: str):
        """Create processors for enabled sinks and configure logfire."""
        for sink in self._sinks():
            if sink.enabled:
                sink._processor = sink.create_processor(log_root, run_name)

        processors = [
            sink._processor for sink in self._sinks()
            if sink.enabled and sink._processor
        ]

        import logfire
        from logfire import ConsoleOptions

        console_config = (
            ConsoleOptions(
                # logfire has no level below trace
                min_log_level=(
                    "trace" if self.console.level == "spew"
                    else self.console.level
                ),
                verbose=self.console.verbose,
                colors=self.console.colors,
                include_timestamps=True,
            )
            if self.console.enabled
            else False
        )

        logfire.configure(
            service_name=f"stylefix-{run_name}",
            send_to_logfire=self.logfire.enabled,
            token=self.logfire.token if self.logfire.enabled else None,
            console=console_config,
            additional_span_processors=processors or None,
        )

    def info(self, msg: str, **kwargs):
        import logfire
        logfire.info(msg, **kwargs)

    def debug(self, msg: str, **kwargs):
        import logfire
        logfire.debug(msg, **kwargs)

    def trace(self, msg: str, **kwargs):
        import logfire
        logfire.log(
            level=LevelFilteringExporter._level_thresholds['trace'],
            msg_template=msg,
            attributes=kwargs or None
        )

    def spew(self, msg: str, **kwargs):
        """Log below trace, for per-directory walk noise."""
        import logfire
        logfire.log(
            level=LevelFilteringExporter._level_thresholds['spew'],
            msg_template=msg,
            attributes=kwargs or None
        )

    def warn(self, msg: str, **kwargs):
        import logfire
        logfire.warn(msg, **kwargs)

    warning = warn

    def error(self, msg: str, **kwargs):
        import logfire
        logfire.error(msg, **kwargs)

    def span(self, msg: str, **kwargs):
        """Open a span: ``with logger.span("cleanup"): ...``"""
        import logfire
        return logfire.span(msg, **kwargs)


def setup_logger(
    log_root: Path,
    run_name: str,
    console: ConsoleSink | None = None,
    file: FileSink | None = None,
    logfire: LogfireSink | None = None,
    level: str = "info",
) -> Logger:
    """Install the global logger behind the ``logger`` proxy.

    Config calls this after loading; tests call it directly.

    Args:
        log_root: Root directory for log files
        run_name: Name of the current run
        console: Console sink config (defaults if None)
        file: File sink config (defaults if None)
        logfire: logfire.dev sink config (defaults if None)
        level: Default level for sinks that set none

    Returns:
        The installed Logger
    """
    global _current_logger

    if _current_logger is not None:
        _current_logger.close()

    _current_logger = Logger(
        level=level,
        console=console or ConsoleSink(),
        file=file or FileSink(),
        logfire=logfire or LogfireSink(),
    )
    _current_logger.setup(log_root, run_name)

    return _current_logger


__all__ = [
    "logger",
    "Logger",
    "ConsoleSink",
    "FileSink",
    "LogfireSink",
    "LevelFilteringExporter",
    "setup_logger",
]
