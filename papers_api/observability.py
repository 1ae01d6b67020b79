"""Structured logging configuration built on structlog.

Console rendering is used for local development and JSON rendering for
deployed environments. The configuration is applied once by the runtime
entrypoint before any component logs.
"""

import logging
import sys

import structlog
from structlog.types import Processor


def observability_configure_logging(level: str = "INFO", fmt: str = "console") -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Root log level name.
        fmt: Renderer selection, `console` or `json`.

    Returns:
        None: Logging is configured as a side effect.

    Raises:
        ValueError: Raised when the renderer selection is unsupported.
    """

    if fmt not in {"console", "json"}:
        raise ValueError(f"unsupported log format: {fmt}")

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]
    if fmt == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(exception_formatter=structlog.dev.plain_traceback))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )

    # Request logging middleware replaces uvicorn access lines.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def observability_get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the given name.

    Args:
        name: Logger name, usually the module `__name__`.

    Returns:
        structlog.stdlib.BoundLogger: Logger instance.
    """

    return structlog.get_logger(name)
