"""structlog configuration for arenagraph.

Library modules log through stdlib ``logging.getLogger(__name__)``; this
module routes those records through structlog so the CLI gets either
human console output or JSON lines on stderr.

Graph mutations log at DEBUG under ``arenagraph.core``. They stay muted
unless *trace* is set, since a bench run performs thousands of them.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "arenagraph"
CORE_LOGGER = "arenagraph.core"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    trace: bool = False,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output for the CLI and services.
        log_json: Use JSON renderer instead of console renderer.
        trace: Also emit per-mutation DEBUG records from the graph core.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: structlog.types.Processor
    if log_json:
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
        cache_logger_on_first_use=False,
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
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    package_level = logging.DEBUG if verbose else logging.WARNING
    core_level = logging.DEBUG if trace else max(package_level, logging.INFO)
    logging.getLogger(PACKAGE_LOGGER).setLevel(package_level)
    logging.getLogger(CORE_LOGGER).setLevel(core_level)
