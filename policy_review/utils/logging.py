"""Logging utilities."""

import logging
import sys
from typing import Optional


def setup_logging(
    level: int = logging.WARNING,
    format_str: Optional[str] = None
) -> logging.Logger:
    """
    Route policy_review log records to stderr.

    The report itself is printed to stdout, so nothing logged here ends up
    mixed into it.

    Args:
        level: Logging level (default: WARNING)
        format_str: Custom format string

    Returns:
        Configured logger
    """
    if format_str is None:
        format_str = "[%(asctime)s] %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )

    logger = logging.getLogger("policy_review")
    logger.setLevel(level)

    return logger


def get_logger(name: str = "policy_review") -> logging.Logger:
    """Return the package logger, or a child of it when given a module name."""
    return logging.getLogger(name)
