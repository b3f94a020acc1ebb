"""
Book extraction modules for rokomari.com.

Modules:
    rokomari_scraper - RokomariBookScraper, aggregates one book record
    fetchers - HTTP and browser page fetchers
    specifications - SpecificationFetcher for the server action call
    url_utils - Book ID extraction and image URL normalization
    parsers - Page and specification response parsers
"""

from .fetchers import (
    BrowserPageFetcher,
    HttpPageFetcher,
    PageFetcher,
    create_page_fetcher,
)
from .parsers import BookPageParser, parse_specifications
from .rokomari_scraper import RokomariBookScraper
from .specifications import SpecificationFetcher
from .url_utils import extract_book_id, normalize_image_url


def is_valid_book_url(url) -> bool:
    """Check that a value looks like an HTTP(S) URL."""
    return isinstance(url, str) and url.startswith("http")


__all__ = [
    # Scraper
    'RokomariBookScraper',
    # Fetchers
    'PageFetcher',
    'HttpPageFetcher',
    'BrowserPageFetcher',
    'create_page_fetcher',
    'SpecificationFetcher',
    # Helper functions
    'extract_book_id',
    'normalize_image_url',
    'is_valid_book_url',
    # Parsers
    'BookPageParser',
    'parse_specifications',
]
