"""Structured logging for fallible.

Library loggers are structlog wrappers around stdlib loggers under the
``fallible`` namespace, which carries only a NullHandler. Until the host
application configures logging (or calls ``configure_logging``) nothing
is written anywhere, and DEBUG events are dropped by the stdlib level check.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

__all__ = ['LOGGER_NAME', 'configure_logging', 'get_logger']

LOGGER_NAME = 'fallible'

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def _get_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    stream: IO[str] | None = None,
) -> None:
    """Route fallible's log events to a stream.

    Installs a structlog ProcessorFormatter handler on the ``fallible``
    logger only; the root logger and any handlers the host installed are
    left alone. Calling it again replaces the previous handler.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
        stream: Destination, stderr by default.
    """
    structlog.configure(
        processors=_get_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(formatter)

    lib_logger = logging.getLogger(LOGGER_NAME)
    lib_logger.handlers.clear()
    lib_logger.addHandler(handler)
    lib_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    lib_logger.propagate = False


def get_logger(name: str) -> Any:
    """Get a structlog logger bound to the stdlib logger ``name``.

    The logger is never cached, so it follows whatever structlog
    configuration is active when an event is emitted.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
