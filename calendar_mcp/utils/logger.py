"""
Logger Utility Module

This module provides functions for setting up and configuring the application logger.
Logs go to stderr so that stdout stays reserved for the stdio MCP transport.
"""

import logging
import sys
from typing import Optional

from calendar_mcp.utils.config import get_config_value

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_log_level() -> int:
    """
    Resolve the configured ``server.log_level`` to a logging level.

    Unknown names fall back to INFO.
    """
    level_name = str(get_config_value("log_level", "INFO") or "INFO").upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def setup_logger(name: Optional[str] = None, level: Optional[int] = None) -> logging.Logger:
    """
    Set up the package logger with a single stderr handler.

    Args:
        name (Optional[str]): Logger name. Defaults to "calendar_mcp".
        level (Optional[int]): Explicit level; the configured level is used when omitted.

    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(name or "calendar_mcp")

    # Repeated calls only adjust the level
    log_level = get_log_level() if level is None else level
    logger.setLevel(log_level)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger; it inherits the package logger's handler and level."""
    return logging.getLogger(name)
