"""Structured logging configuration.

structlog events and plain stdlib records (uvicorn, fastapi) go through the
same processor chain and a single stdout handler on the root logger.
"""

import logging
import sys
from collections.abc import Callable

import structlog
from structlog.typing import Processor

from hangul_drill.core.config import get_settings
from hangul_drill.core.exceptions import ConfigurationError

_RENDERERS: dict[str, Callable[[], Processor]] = {
    # Korean answers stay readable in the JSON output
    "json": lambda: structlog.processors.JSONRenderer(ensure_ascii=False),
    "text": lambda: structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
}

_SHARED_PROCESSORS: list[Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]

_QUIET_LOGGERS = ("uvicorn.access",)


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(f"Unknown log level {level!r}")
    return resolved


def setup_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Configure structured logging with structlog.

    Args:
        level: Log level name; defaults to the configured ``log_level``.
        log_format: ``json`` or ``text``; defaults to the configured ``log_format``.

    Raises:
        ConfigurationError: If the level or format is not supported.
    """
    settings = get_settings()
    level = level or settings.log_level
    log_format = log_format or settings.log_format

    if log_format not in _RENDERERS:
        raise ConfigurationError(
            f"Unsupported log format {log_format!r}, expected one of {sorted(_RENDERERS)}"
        )
    numeric_level = _resolve_level(level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _RENDERERS[log_format](),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(numeric_level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
