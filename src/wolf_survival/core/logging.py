"""Structured logging for the Wolf survival engine.

Every engine component logs through structlog with key/value context
(day, node id, stat values). Output goes to stderr by default so it never
mixes with a text frontend drawing on stdout; a log file can be named
instead. Rendering is either the coloured console renderer or JSON lines.

Example:
    >>> from wolf_survival.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("Day advanced", day=3, health=80)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

import structlog
from structlog.types import Processor

from wolf_survival.core.config import Settings, get_settings
from wolf_survival.core.exceptions import ConfigurationError


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


APP_LOGGER_NAME = "wolf_survival"

# Handle of the current log file; closed when logging is reconfigured.
_log_stream: TextIO | None = None


def make_app_context(app_name: str = APP_LOGGER_NAME) -> Processor:
    """Build a processor that tags each entry with the application name."""

    def add_app_context(
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        event_dict.setdefault("app", app_name)
        return event_dict

    return add_app_context


add_app_context = make_app_context()


def resolve_level(level: str) -> int:
    """Translate a level name into a stdlib logging level.

    Raises:
        ConfigurationError: If the name is not a known level.
    """
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ConfigurationError(
            f"Unknown log level: {level}",
            config_key="log_level",
        )
    return value


def configure_logging(
    settings: Settings | None = None,
    *,
    level: str | None = None,
    json_format: bool | None = None,
    log_file: str | Path | None = None,
) -> None:
    """Configure application-wide logging.

    Explicit keyword arguments win over the values in settings. With
    settings.debug on, the level defaults to DEBUG. A log file opened by
    an earlier call is closed.

    Args:
        settings: Application settings; loaded from the environment if
            omitted.
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: Emit JSON lines instead of console output.
        log_file: Append logs to this file instead of stderr.

    Raises:
        ConfigurationError: If the level name is unknown.
    """
    global _log_stream

    settings = settings or get_settings()
    numeric_level = resolve_level(level or ("DEBUG" if settings.debug else settings.log_level))
    use_json = settings.log_json if json_format is None else json_format
    target = log_file if log_file is not None else settings.log_file

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        make_app_context(settings.app_name),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if use_json:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=target is None))

    if _log_stream is not None:
        _log_stream.close()
        _log_stream = None

    if target is not None:
        path = Path(target)
        path.parent.mkdir(parents=True, exist_ok=True)
        _log_stream = path.open("a", encoding="utf-8")
        logger_factory = structlog.WriteLoggerFactory(file=_log_stream)
    else:
        logger_factory = structlog.PrintLoggerFactory(file=sys.stderr)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger, typically with ``__name__``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind values included in every later log entry, e.g. a save slot."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


__all__ = [
    "add_app_context",
    "make_app_context",
    "resolve_level",
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
