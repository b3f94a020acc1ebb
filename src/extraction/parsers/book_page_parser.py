"""
Book Page Parser

Extracts book information from the HTML of a book page:
- Title and summary from their text containers
- Main cover image from the "look inside" container
- Thumbnail gallery images

Image URLs are rewritten to the configured dimensions. The same parser
is used for plain HTTP responses and for browser-rendered HTML.
"""

from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from ...common.config_loader import ScraperConfig
from ..url_utils import normalize_image_url


class BookPageParser:
    """
    Parses book fields from page HTML using configured CSS selectors.

    Usage:
        parser = BookPageParser(soup, config)
        title = parser.extract_title()
        images = parser.extract_list_images()
    """

    def __init__(self, soup: BeautifulSoup, config: ScraperConfig):
        """
        Initialize the parser.

        Args:
            soup: BeautifulSoup object of the page
            config: Scraper configuration (selectors and image settings)
        """
        self.soup = soup
        self.config = config
        self.selectors = config.selectors

    @classmethod
    def from_html(cls, html: str, config: ScraperConfig) -> "BookPageParser":
        """Build a parser from raw HTML."""
        return cls(BeautifulSoup(html, "lxml"), config)

    def extract_title(self) -> Optional[str]:
        """
        Extract the book title.

        Returns:
            Trimmed title text, or None if the element is missing
        """
        return self._select_text(self.selectors.title)

    def extract_summary(self) -> Optional[str]:
        """
        Extract the book summary.

        Returns:
            Trimmed summary text, or None if the element is missing
        """
        return self._select_text(self.selectors.summary)

    def extract_main_image(self) -> Optional[str]:
        """
        Extract the main cover image URL.

        Returns:
            Normalized image URL, or None if no image is found
        """
        element = self.soup.select_one(self.selectors.main_image)
        if element is None:
            return None
        return self._normalize(self._image_source(element))

    def extract_list_images(self) -> List[str]:
        """
        Extract thumbnail image URLs in page order.

        Returns:
            List of normalized image URLs (images without a source are skipped)
        """
        images = []
        for element in self.soup.select(self.selectors.list_images):
            src = self._normalize(self._image_source(element))
            if src:
                images.append(src)
        return images

    def _select_text(self, selector: str) -> Optional[str]:
        element = self.soup.select_one(selector)
        if element is None:
            return None
        return element.get_text().strip()

    def _image_source(self, element: Tag) -> Optional[str]:
        """Return src, falling back to the lazy-load attribute."""
        return element.get("src") or element.get(self.config.lazy_src_attribute) or None

    def _normalize(self, url: Optional[str]) -> Optional[str]:
        return normalize_image_url(
            url,
            self.config.target_dimensions,
            self.config.dimension_pattern,
        )
