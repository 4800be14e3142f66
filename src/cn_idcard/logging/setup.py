"""Logging configuration for cn-idcard.

Provides structured JSON logging or plain text logging for applications
embedding the validator. The library itself only creates loggers; nothing is
configured until ``setup_logging`` is called.
"""

import logging
import os
import sys
from typing import Any, Optional

from pythonjsonlogger import jsonlogger


# Handler installed by setup_logging; other handlers on the root logger are left alone
_handler: Optional[logging.Handler] = None


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with additional fields."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add custom fields to log record."""
        super().add_fields(log_record, record, message_dict)

        # Rename fields for better compatibility
        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")
        if "asctime" in log_record:
            log_record["timestamp"] = log_record.pop("asctime")

        log_record["service"] = "cn-idcard"


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env var
               CN_IDCARD_LOG_LEVEL or INFO.
        json_format: Whether to use JSON format. Defaults to env var
                     CN_IDCARD_LOG_FORMAT == 'json' or True.
    """
    global _handler

    if level is None:
        level = os.getenv("CN_IDCARD_LOG_LEVEL", "INFO").upper()
    if json_format is None:
        log_format = os.getenv("CN_IDCARD_LOG_FORMAT", "json").lower()
        json_format = log_format == "json"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace only the handler installed by a previous call
    if _handler is not None:
        root_logger.removeHandler(_handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    if json_format:
        formatter = CustomJsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    _handler = handler


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Configured logger instance.
    """
    return logging.getLogger(name)
