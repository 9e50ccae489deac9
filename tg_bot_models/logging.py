"""
Structured logging configuration for tg-bot-models.

The model layer only emits log events; it never configures logging on
import. Applications (and the bundled CLI) call setup_logging() or
setup_logging_from_config() once. Console output always goes to stderr
because stdout carries the JSON documents the CLI prints.
"""

import json
import logging
import logging.handlers
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog

from tg_bot_models.constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_MAX_BYTES,
    JSON_SEPARATORS,
)

# Flag to track if logging has been configured
_logging_configured = False

_SHARED_PROCESSORS: list[Any] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def reset_logging() -> None:
    """
    Reset logging configuration flag.

    This is primarily used in tests to allow reconfiguration between test runs.
    """
    global _logging_configured  # noqa: PLW0603
    _logging_configured = False


def _serialize_event(event: Any, **kwargs: Any) -> str:
    # Same compact, non-escaping encoding as the documents the package emits
    kwargs.setdefault("separators", JSON_SEPARATORS)
    kwargs.setdefault("ensure_ascii", False)
    return json.dumps(event, **kwargs)


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        renderer: Any = structlog.processors.JSONRenderer(serializer=_serialize_event, default=str)
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=False,
            exception_formatter=structlog.dev.plain_traceback,
        )
    return structlog.stdlib.ProcessorFormatter(processor=renderer)


def _has_stderr_handler(root_logger: logging.Logger) -> bool:
    return any(
        type(handler) is logging.StreamHandler and handler.stream is sys.stderr
        for handler in root_logger.handlers
    )


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_format: str = DEFAULT_LOG_FORMAT,
    log_file: str | None = None,
    max_bytes: int = DEFAULT_LOG_MAX_BYTES,
    backup_count: int = DEFAULT_LOG_BACKUP_COUNT,
) -> None:
    """
    Configure structured logging.

    This function is idempotent - subsequent calls after the first will be ignored.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); unknown
            names fall back to the default level
        log_format: Log format ("json" or "text")
        log_file: Path to a rotating log file (optional)
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of backup files to keep
    """
    global _logging_configured  # noqa: PLW0603

    if _logging_configured:
        return

    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.getLevelName(DEFAULT_LOG_LEVEL)

    # Events go through standard logging so pytest's caplog sees them
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = _build_formatter(log_format)
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not _has_stderr_handler(root_logger):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _logging_configured = True


def setup_logging_from_config(settings: Mapping[str, Any], verbose: bool = False) -> None:
    """
    Configure logging from the [logging] section of the configuration.

    Args:
        settings: The logging section (level, format, file, max_bytes, backup_count)
        verbose: Force DEBUG level regardless of the configured level
    """
    setup_logging(
        level="DEBUG" if verbose else settings.get("level", DEFAULT_LOG_LEVEL),
        log_format=settings.get("format", DEFAULT_LOG_FORMAT),
        log_file=settings.get("file") or None,
        max_bytes=settings.get("max_bytes", DEFAULT_LOG_MAX_BYTES),
        backup_count=settings.get("backup_count", DEFAULT_LOG_BACKUP_COUNT),
    )


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    The returned proxy resolves the structlog configuration on first use,
    so module-level loggers created at import time still honour a later
    setup_logging() call.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Structlog lazy logger proxy
    """
    return structlog.get_logger(name)
