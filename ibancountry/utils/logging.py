"""
Structured logging configuration using structlog.

- Console output for development, JSON or key-value pairs otherwise
- Account numbers masked before they reach any renderer
- Timing helper for one-off expensive operations
"""

import logging
import sys
import time
from typing import Any, cast

import structlog
from structlog.types import EventDict, Processor

# Keys whose values are bank account numbers
SENSITIVE_KEYS = frozenset({"address", "iban"})


def mask_account_number(value: str) -> str:
    """Keep the country code, check digits and last four characters."""
    if len(value) <= 8:
        return "*" * len(value)
    return f"{value[:4]}...{value[-4:]}"


def filter_sensitive_data(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Mask account numbers in log entries.

    Addresses are personal data; only their shape is needed for debugging.
    """
    for key in SENSITIVE_KEYS:
        value = event_dict.get(key)
        if isinstance(value, str):
            event_dict[key] = mask_account_number(value)
    return event_dict


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add application context to every log entry."""
    from ibancountry import __version__

    event_dict["app"] = "ibancountry"
    event_dict["version"] = __version__
    return event_dict


def _renderer_chain(json_logs: bool, dev_mode: bool) -> list[Processor]:
    shared_processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
        filter_sensitive_data,
    ]

    if dev_mode:
        return shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]
    if json_logs:
        return shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    return shared_processors + [
        structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
    ]


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    dev_mode: bool = True,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_logs: Whether to output JSON logs
        dev_mode: Whether to use development-friendly output
    """
    structlog.configure(
        processors=[structlog.stdlib.filter_by_level, *_renderer_chain(json_logs, dev_mode)],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Logs go to stderr so command output on stdout stays parseable
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Usage:
        logger = get_logger(__name__)
        logger.info("pattern_set_compiled", countries=75)
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


class LogPerformance:
    """
    Context manager for logging performance metrics.

    Usage:
        with LogPerformance("pattern_set_build", logger) as perf:
            # ... expensive operation
            pass
        perf.duration  # seconds
    """

    def __init__(self, operation: str, logger: structlog.stdlib.BoundLogger):
        self.operation = operation
        self.logger = logger
        self.start_time: float = 0
        self.duration: float = 0

    def __enter__(self) -> "LogPerformance":
        self.start_time = time.perf_counter()
        self.logger.debug(f"{self.operation}_started")
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.duration = time.perf_counter() - self.start_time

        if exc_type is None:
            self.logger.info(
                f"{self.operation}_completed",
                duration_ms=round(self.duration * 1000, 2),
                operation=self.operation,
            )
        else:
            self.logger.critical(
                f"{self.operation}_failed",
                duration_ms=round(self.duration * 1000, 2),
                operation=self.operation,
                error=str(exc_val),
                error_type=exc_type.__name__ if exc_type else None,
            )


# Library default: loggers go through stdlib logging, but no handler is
# installed until an application calls configure_logging().
structlog.configure(
    processors=[structlog.stdlib.filter_by_level, *_renderer_chain(False, False)],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=False,
)
