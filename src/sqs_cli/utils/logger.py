"""
Module: logger.py
Description: Structured logging configuration for the SQS CLI.

Configures structlog for JSON output on stderr. Standard output is
reserved for the message lines the CLI prints, so log records never
interleave with them.

Key Components:
- Timestamp and log level processors
- configure_logging() to set the minimum level
- get_logger() helper function

Dependencies: structlog, logging, datetime
"""

import logging
import sys
from datetime import datetime, timezone

import structlog


def _add_timestamp(logger, method_name, event_dict):
    """
    Add ISO 8601 UTC timestamp to log entries.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with timestamp
    """
    event_dict["timestamp"] = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    """Add log level to event dictionary."""
    event_dict["level"] = method_name.upper()
    return event_dict


def _stderr_logger_factory(*args):
    # Resolve sys.stderr per logger so redirected streams are honoured.
    return structlog.WriteLogger(sys.stderr)


def configure_logging(level: str = "WARNING") -> None:
    """
    Configure structlog for the CLI.

    Args:
        level: Minimum level name to emit (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Raises:
        ValueError: If level is not a known logging level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    structlog.configure(
        processors=[
            _add_timestamp,
            _add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=_stderr_logger_factory,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Message sent", index=0, message_id="5fea7756")
        {"index": 0, "message_id": "5fea7756", "event": "Message sent", "timestamp": "...", "level": "INFO"}
    """
    return structlog.get_logger(name)


configure_logging()
