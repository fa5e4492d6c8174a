"""Structured logging setup for wp-essentials."""

import logging
import sys
from typing import Any

import structlog


def setup_logging(json_logs: bool = False, log_level_name: str = "INFO") -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        json_logs: Render one JSON object per line instead of console output
        log_level_name: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso" if json_logs else "%H:%M:%S"),
        structlog.processors.StackInfoRenderer(),
    ]

    renderer: Any
    if json_logs:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)


def setup_logging_from_settings(level: str = "INFO", format: str = "auto") -> None:
    """Configure logging from LoggingSettings values.

    ``auto`` renders JSON when stderr is not a terminal.
    """
    json_logs = format == "json" or (format == "auto" and not sys.stderr.isatty())
    setup_logging(json_logs=json_logs, log_level_name=level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
