"""
Structured Logging Configuration Module

Provides JSON-formatted structured logging for account operations.
"""

import logging
import json
from datetime import datetime, timezone
from typing import Optional

from .config import get_config

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.module if hasattr(record, 'module') else record.name,
            "logger": record.name,
            "message": record.getMessage(),
            "correlation_id": getattr(record, 'correlation_id', None),
            "action": getattr(record, 'action', None),
            "resource": getattr(record, 'resource', None),
            "extra": getattr(record, 'extra', None)
        }

        # Remove None values
        log_entry = {k: v for k, v in log_entry.items() if v is not None}

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level: Optional[str] = None, logger_name: str = "bank_account",
                  log_format: Optional[str] = None,
                  log_file: Optional[str] = None) -> logging.Logger:
    """
    Setup logging for the package.

    Arguments left as None are taken from the configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        logger_name: Name of the logger
        log_format: "json" or "text"
        log_file: Path of a log file; stdout when unset

    Returns:
        Configured logger instance
    """
    cfg = get_config()
    level = level or cfg.log_level
    log_format = log_format or cfg.log_format
    log_file = log_file or cfg.log_file

    if log_format not in ("json", "text"):
        raise ValueError(f"Unsupported log format: {log_format!r}")

    logger = logging.getLogger(logger_name)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()

    if log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False

    return logger


def get_logger(name: str = "bank_account") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


def log_action(logger: logging.Logger, level: str, message: str,
               action: Optional[str] = None, resource: Optional[str] = None,
               correlation_id: Optional[str] = None,
               extra: Optional[dict] = None):
    """
    Log an action with structured data.

    Args:
        logger: Logger instance
        level: Log level (info, warning, error, etc.)
        message: Log message
        action: Action being performed
        resource: Resource being acted upon
        correlation_id: Correlation ID for tracing
        extra: Additional structured data
    """
    levelno = getattr(logging, level.upper())
    if not logger.isEnabledFor(levelno):
        return

    fields = {}
    if action:
        fields['action'] = action
    if resource:
        fields['resource'] = resource
    if correlation_id:
        fields['correlation_id'] = correlation_id
    if extra:
        fields['extra'] = extra

    logger.log(levelno, message, extra=fields)
