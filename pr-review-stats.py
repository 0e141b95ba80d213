#!/usr/bin/env python3
"""
PR Review Stats
Reports review turnaround for recently merged PRs in a GitHub repository.
"""

import argparse
import logging
import os
import sys
from dotenv import load_dotenv

from review_stats.api_client import GitHubAPIClient
from review_stats.config import load_settings
from review_stats.output import OutputFormatter
from review_stats.reporter import StatisticsReporter


def configure_logging(level_name: str):
    """Configure root logging; unknown level names fall back to INFO."""
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%m/%d/%Y %I:%M:%S %p'
    )


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Report PR review turnaround statistics for a GitHub repository."
    )
    parser.add_argument('owner', help="Repository owner (user or organization)")
    parser.add_argument('repo', help="Repository name")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point for the script."""
    # Load environment variables from .env file if it exists
    load_dotenv()

    # Configure logging (can be overridden by LOG_LEVEL environment variable)
    configure_logging(os.environ.get('LOG_LEVEL', 'INFO').upper())

    args = parse_args(argv)
    settings = load_settings()

    client = GitHubAPIClient(
        settings.token,
        base_url=settings.api_url,
        max_retries=settings.max_retries,
        timeout=settings.timeout
    )
    reporter = StatisticsReporter(
        client,
        window_days=settings.window_days,
        sort_approvals=settings.sort_approvals,
        max_workers=settings.review_fetch_workers,
        formatter=OutputFormatter(settings.window_days)
    )

    try:
        reporter.report(args.owner, args.repo)
    except Exception as e:
        logging.error(f"An unexpected error occurred: {e}", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
