#!/usr/bin/env python3
"""
Bank Policy Review - Main Entry Point

Prints a canned policy review of the bundled demo violations. The
violations are static data; nothing is scanned.

Usage:
    python -m policy_review.main
    python -m policy_review.main --format markdown
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import ReviewConfig, DEFAULT_CONFIG, OUTPUT_FORMATS
from .models import PolicyReport
from .pipeline import generate_policy_report
from .rules import DEMO_VIOLATIONS
from .utils import setup_logging, get_logger, format_console_report, format_markdown_report


def run_review(config: ReviewConfig = DEFAULT_CONFIG) -> PolicyReport:
    """
    Generate and print the demo policy report.

    Args:
        config: Review configuration

    Returns:
        The generated report
    """
    logger = get_logger()

    logger.info(f"Generating policy report for {len(DEMO_VIOLATIONS)} violations")
    report = generate_policy_report(DEMO_VIOLATIONS)
    logger.info(f"Policy review {report.status}")

    if config.output_format == "markdown":
        print(format_markdown_report(report))
    else:
        print(format_console_report(report, show_code=config.show_code))

    return report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Bank policy review demonstration"
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=OUTPUT_FORMATS,
        help="Output format (default: text, or POLICY_REVIEW_FORMAT)"
    )
    parser.add_argument(
        "--no-code",
        action="store_true",
        help="Don't show code snippets for violations"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None):
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(level=logging.DEBUG if args.debug else logging.WARNING)
    logger = get_logger()

    try:
        config = ReviewConfig.from_env(output_format=args.format)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    if args.no_code:
        config.show_code = False
    if args.debug:
        config.debug = True
    if config.debug:
        logger.setLevel(logging.DEBUG)

    # A failed review is still a successful run
    try:
        run_review(config)
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Policy review failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
