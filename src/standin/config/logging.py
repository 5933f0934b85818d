"""structlog configuration for standin.

Two output modes:
- Human (default): colored console output to stderr
- JSON (log_json): structured JSON lines to stderr

Only the ``standin`` logger gets a handler, and it stops propagating, so
the root logger (and pytest's capture handlers on it) are left untouched.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "standin"

# Marks the handler installed here so repeated calls replace it.
_HANDLER_NAME = "standin-structlog"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    standin_logger = logging.getLogger(LOGGER_NAME)
    standin_logger.handlers = [h for h in standin_logger.handlers if h.get_name() != _HANDLER_NAME]
    standin_logger.addHandler(handler)
    standin_logger.setLevel(level)
    standin_logger.propagate = False
