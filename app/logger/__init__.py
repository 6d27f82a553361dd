"""Logger module for hello-demo

This module provides a small logging interface with a structured
implementation that writes to stdout (and optionally a file).

Usage:
    from app.logger import session_logger

    session_logger.info("Application started", port=8080)

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

import logging
import os

from .base import Logger
from .structured_logger import StructuredLogger

# Configuration from environment
LOG_LEVEL_STR = os.environ.get("HELLODEMO_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.environ.get("HELLODEMO_LOG_FILE")
LOG_JSON = os.environ.get("HELLODEMO_LOG_JSON", "false").lower() == "true"

# Map string level to logging constant
LOG_LEVEL = getattr(logging, LOG_LEVEL_STR, logging.INFO)

# Shared logger instance
session_logger: StructuredLogger = StructuredLogger(
    level=LOG_LEVEL,
    log_file=LOG_FILE,
    json_format=LOG_JSON
)

__all__ = [
    "Logger",
    "StructuredLogger",
    "session_logger",
]
