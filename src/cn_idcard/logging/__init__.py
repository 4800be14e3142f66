"""Logging configuration module for cn-idcard."""

from cn_idcard.logging.setup import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
