"""Structured logging configuration using structlog.

JSON output for simulation runs and colored console output for
development, with context bound through structlog.contextvars (the
portfolio manager binds the current tick while it runs).
"""

import sys
from typing import Any, cast

import structlog
from structlog.types import EventDict, WrappedLogger

LEVELS: dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}


class FloatRounder:
    """Processor that rounds float values so energy figures stay readable."""

    def __init__(self, digits: int = 6) -> None:
        self._digits = digits

    def __call__(
        self,
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        for key, value in event_dict.items():
            if isinstance(value, float):
                event_dict[key] = round(value, self._digits)
        return event_dict


def setup_logging(
    level: str = "INFO",
    format: str = "json",
    round_floats: bool = True,
) -> None:
    """Configure structured logging.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        format: Output format - "json" for runs, "console" for development
        round_floats: Whether to round float fields before rendering
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if round_floats:
        processors.append(FloatRounder())

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            LEVELS.get(level.upper(), 20)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance bound to the given name.

    Args:
        name: Logger name (typically __name__ of the module)
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
