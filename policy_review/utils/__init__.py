"""Utility functions."""

from .logging import setup_logging, get_logger
from .formatting import (
    get_severity_emoji,
    get_category_emoji,
    format_console_report,
    format_markdown_report,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "get_severity_emoji",
    "get_category_emoji",
    "format_console_report",
    "format_markdown_report",
]
