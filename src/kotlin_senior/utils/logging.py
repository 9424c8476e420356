"""Structured logging setup (structlog). Logs never go to stdout, which carries the MCP protocol."""

import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, TextIO

import structlog

from kotlin_senior.config.settings import LoggingSettings


# File opened by the last configure_logging call; closed when logging is reconfigured.
_log_file_handle: Optional[TextIO] = None


def _open_stream(log_file: Optional[str]) -> TextIO:
    global _log_file_handle
    if _log_file_handle is not None:
        _log_file_handle.close()
        _log_file_handle = None
    if not log_file:
        return sys.stderr
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    _log_file_handle = open(path, "a", encoding="utf-8")
    return _log_file_handle


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """Configure structlog with level filtering, timestamps, and JSON or console rendering."""
    settings = settings or LoggingSettings()
    level = getattr(logging, settings.log_level)
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if settings.log_format == "json":
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=_open_stream(settings.log_file)),
        cache_logger_on_first_use=False,
    )
