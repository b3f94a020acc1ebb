#!/usr/bin/env python3
"""
Single Book Scrape

Scrapes one rokomari.com book page and prints the record as JSON.
Progress messages go to stderr; stdout carries only the JSON record.

Usage:
    python3 scrape_book.py
    python3 scrape_book.py https://www.rokomari.com/book/48659/masud-rana-hacker-1-and-2
    python3 scrape_book.py <url> --browser --verbose
    python3 scrape_book.py <url> --output-json output/book.json
"""

import argparse
import json
import logging
import os
import sys

import yaml

from src.common.config_loader import load_scraper_config
from src.common.log_config import setup_logging
from src.extraction import RokomariBookScraper, is_valid_book_url

logger = logging.getLogger("src.scrape_book")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Scrape a rokomari.com book page and print it as JSON"
    )
    parser.add_argument(
        "url",
        nargs="?",
        help="Book page URL (default: default_url from the config)"
    )
    parser.add_argument(
        "--browser",
        action="store_true",
        help="Render the page in a headless browser instead of a plain HTTP fetch"
    )
    parser.add_argument(
        "--config",
        help="Path to a scraper YAML config (default: config/scraper.yaml)"
    )
    parser.add_argument(
        "--target-dimensions",
        help="Image dimension token to rewrite URLs to, e.g. 260X372"
    )
    parser.add_argument(
        "--output-json",
        help="Also write the record to this JSON file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log warnings and errors"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        config = load_scraper_config(args.config)
        config = config.with_overrides(
            fetcher="browser" if args.browser else None,
            target_dimensions=args.target_dimensions,
        )
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    url = args.url or config.default_url
    if not is_valid_book_url(url):
        print(f"Please provide a valid Rokomari book URL (got: {url!r}).", file=sys.stderr)
        return 1

    logger.info("Starting full scrape for: %s", url)
    with RokomariBookScraper(config) as scraper:
        record = scraper.scrape(url)

    output = json.dumps(record.to_dict(), indent=2, ensure_ascii=False)
    print(output)

    if args.output_json:
        output_dir = os.path.dirname(args.output_json)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(args.output_json, 'w', encoding='utf-8') as f:
            f.write(output + "\n")
        logger.info("Record saved to: %s", args.output_json)

    return 0 if record.error is None else 1


if __name__ == "__main__":
    sys.exit(main())
