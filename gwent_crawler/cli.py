#!/usr/bin/env python3
"""
Gwent Crawler command line entry point

Usage:
    gwent-crawler --ids Players.csv --output Data.csv --concurrency 8
"""

import argparse
import logging
import sys
from typing import List, Optional

from gwent_crawler.config.settings import (
    CrawlerConfig, DEFAULT_CONCURRENCY, DEFAULT_ID_FILE, DEFAULT_OUTPUT_FILE,
    GATE_MMR_MATCH, GATE_OWN_MATCH, PROFILE_BASE_URL
)
from gwent_crawler.core import ProfileCrawler
from gwent_crawler.exceptions import CrawlerError
from gwent_crawler.utils import setup_logging

logger = logging.getLogger("gwent_crawler")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="gwent-crawler",
        description="Scrape Gwent player profiles into a CSV table",
    )
    ap.add_argument("--ids", default=DEFAULT_ID_FILE, help="CSV file with player ids in the first column")
    ap.add_argument("--output", default=DEFAULT_OUTPUT_FILE, help="Output CSV path")
    ap.add_argument("--factions", default=None, help="Also write per-faction wins to this CSV")
    ap.add_argument("--concurrency", type=int, default=DEFAULT_CONCURRENCY, help="Profiles fetched at once")
    ap.add_argument("--base-url", default=PROFILE_BASE_URL, help="Profile URL prefix")
    ap.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds (default: none)")
    ap.add_argument("--legacy-gating", action="store_true",
                    help="Only read losses, draws and rank when the MMR marker is present")
    ap.add_argument("--debug", action="store_true", help="Log every player as it is crawled")
    ap.add_argument("--log-file", default=None, help="Also write the log to this file")
    return ap


def config_from_args(args: argparse.Namespace) -> CrawlerConfig:
    return CrawlerConfig(
        id_file=args.ids,
        output_file=args.output,
        factions_file=args.factions,
        concurrency=args.concurrency,
        base_url=args.base_url,
        debug=args.debug,
        request_timeout=args.timeout,
        gate_policy=GATE_MMR_MATCH if args.legacy_gating else GATE_OWN_MATCH,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"gwent-crawler: error: {e}", file=sys.stderr)
        return 2

    setup_logging(level="DEBUG" if config.debug else "INFO", log_file=args.log_file)

    try:
        with ProfileCrawler(config) as crawler:
            filepath = crawler.run()
    except CrawlerError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Done, results written to {filepath}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
