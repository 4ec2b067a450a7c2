"""Logging utilities for sdf2d.

The library never configures logging on import.  Solver traces are emitted as
structlog debug events and stay silent until an application calls
:func:`configure_logging` (or configures structlog itself).
"""

import logging
import sys

import structlog


def configure_logging(level: str = "WARNING", json: bool = False) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to stderr.

    Args:
        level: Minimum level to emit ("DEBUG" shows every Newton step)
        json: Render events as JSON lines instead of key=value text

    Returns:
        Configured structlog logger for the ``sdf2d`` namespace
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger = logging.getLogger("sdf2d")
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers[:] = [handler]

    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("sdf2d")
    logger.debug("Logging initialized", level=level)
    return logger


def get_logger(name: str = "sdf2d") -> structlog.stdlib.BoundLogger:
    """Return a structlog logger for *name*."""
    return structlog.get_logger(name)
