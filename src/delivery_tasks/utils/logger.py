"""
Module: logger.py
Description: Structured logging configuration for the delivery task creator.

Configures structlog for JSON output so task creation and enqueue
failures land in Cloud Logging as structured entries. The filter level is
process-wide and comes from the environment-loaded global settings.

Key Components:
- Timestamp and log level processors
- JSON renderer
- get_logger() helper function

Dependencies: structlog, logging, datetime
Author: Delivery Platform Team
"""

import logging

import structlog
from datetime import datetime, timezone

from ..config.settings import settings


def _add_timestamp(logger, method_name, event_dict):
    """Add ISO 8601 UTC timestamp to log entries."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _add_severity(logger, method_name, event_dict):
    """
    Add severity to the event dictionary.

    Cloud Logging reads `severity` from JSON payloads, so the level is
    emitted under that key.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with severity
    """
    event_dict["severity"] = method_name.upper()
    return event_dict


structlog.configure(
    processors=[
        _add_timestamp,
        _add_severity,
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ],
    logger_factory=structlog.WriteLoggerFactory(),
    # Drop events below the configured level
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(settings.log_level)
    ),
    cache_logger_on_first_use=True,
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
        >>> logger.info("Created task", task_name="projects/p/locations/l/queues/q/tasks/1")
        {"event": "Created task", "task_name": "...", "timestamp": "...", "severity": "INFO"}
    """
    return structlog.get_logger(name)
