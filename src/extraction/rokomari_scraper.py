"""
Rokomari Book Scraper

Scrapes a single rokomari.com book page into a BookRecord.

Steps:
1. Book ID from the URL
2. Page HTML (plain HTTP or rendered browser)
3. Title, summary and images, each extracted independently
4. Specifications from the server action (only when a book ID exists)
"""

import logging
from typing import Callable, Optional

from ..common.config_loader import ScraperConfig
from ..models import BookRecord
from .fetchers import PageFetcher, create_page_fetcher
from .parsers import BookPageParser
from .specifications import SpecificationFetcher
from .url_utils import extract_book_id

logger = logging.getLogger(__name__)


class RokomariBookScraper:
    """
    Aggregates book page fields and specifications into one record.

    Usage:
        with RokomariBookScraper(config) as scraper:
            record = scraper.scrape(url)
    """

    def __init__(
        self,
        config: ScraperConfig,
        fetcher: Optional[PageFetcher] = None,
        spec_fetcher: Optional[SpecificationFetcher] = None,
    ):
        """
        Initialize the scraper.

        Args:
            config: Scraper configuration
            fetcher: Page fetcher (default: selected by config.fetcher)
            spec_fetcher: Specification fetcher (default: new SpecificationFetcher)
        """
        self.config = config
        self.fetcher = fetcher or create_page_fetcher(config)
        self.spec_fetcher = spec_fetcher or SpecificationFetcher(config)

    def scrape(self, url: str) -> BookRecord:
        """
        Scrape a book page.

        Unexpected errors are stored in record.error; fields gathered
        before the failure are kept.

        Args:
            url: Book page URL

        Returns:
            BookRecord (never raises for network or parse failures)
        """
        record = BookRecord(url=url, book_id=extract_book_id(url, self.config.book_id_pattern))

        try:
            html = self.fetcher.fetch(url)
            parser = BookPageParser.from_html(html, self.config)

            record.title = self._extract_field("title", parser.extract_title)
            logger.info("Title: %s", record.title)

            record.summary = self._extract_field("summary", parser.extract_summary)
            logger.info("Summary: %.100s...", record.summary or "")

            record.main_image = self._extract_field("main image", parser.extract_main_image)
            logger.info("Main image: %s", record.main_image)

            record.list_images = self._extract_field("list images", parser.extract_list_images) or []
            logger.info("List images: %d found", len(record.list_images))

            if record.book_id:
                record.specifications = self.spec_fetcher.fetch(url, record.book_id)

        except Exception as e:
            logger.error("Scraping failed for %s: %s", url, e)
            record.error = str(e) or type(e).__name__

        return record

    def _extract_field(self, name: str, extractor: Callable):
        """Run one field extractor; a failure is logged and yields None."""
        try:
            return extractor()
        except Exception as e:
            logger.warning("Failed to extract %s: %s", name, e)
            return None

    def close(self) -> None:
        self.fetcher.close()
        self.spec_fetcher.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
