"""
Logging Configuration
"""

import logging
from typing import Optional

from gwent_crawler.config.settings import LOG_LEVEL, LOG_FORMAT


def setup_logging(level: str = LOG_LEVEL, format_str: str = LOG_FORMAT, log_file: Optional[str] = None):
    """
    Setup logging configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format_str: Log format string
        log_file: Also write the log to this file when given
    """
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_str,
        handlers=handlers,
    )
