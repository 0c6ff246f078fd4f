"""
Centralized logging configuration for the P2P trade utilities.

Address resolution and trade period calculations log through structlog;
applications call configure_logging once at startup to pick the renderer.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output

    Raises:
        ValueError: If level is not a standard logging level name
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown logging level: {level}")

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_resolver_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for address resolution decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger bound to the address resolution subsystem
    """
    logger = get_logger(name)

    return logger.bind(subsystem="address_resolution")


def log_lookup_miss(
    logger: FilteringBoundLogger,
    trade_id: Optional[str],
    step: str,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a lookup that ended without a result.

    Args:
        logger: Structlog logger instance
        trade_id: ID of the trade being resolved
        step: Name of the resolution step that failed
        reason: Why the step produced no result
        context: Additional context data
    """
    bound_logger = logger.bind(
        trade_id=trade_id,
        step=step,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Trade address lookup miss")
