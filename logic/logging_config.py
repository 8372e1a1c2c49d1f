"""
Logging configuration utility.

Configures the root logger from environment variables: a console handler
always, and a rotating file handler when ``FOODMAP_LOG_FILE`` is set.

Author: Food Map maintainers
Date: 2026-10-19
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_logging(level: str = None, log_file: str = None) -> None:
    """Configure logging once for the process.

    Args:
        level: Level name, defaults to ``FOODMAP_LOG_LEVEL`` or INFO.
        log_file: Optional path for a rotating log file.
    """
    global _configured
    if _configured:
        return

    level_name = (level or os.getenv("FOODMAP_LOG_LEVEL", "INFO")).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    log_file = log_file or os.getenv("FOODMAP_LOG_FILE")

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file:
        logs_dir = os.path.dirname(log_file)
        if logs_dir:
            os.makedirs(logs_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(file_handler)

    _configured = True
