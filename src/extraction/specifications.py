"""
Specification Fetcher

Fetches the specification table of a book through the site's server
action endpoint. The action is addressed by an opaque identifier sent in
the next-action header; the book ID is the only argument.
"""

import json
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

import requests

from ..common.config_loader import ScraperConfig
from .parsers import parse_specifications

logger = logging.getLogger(__name__)


class SpecificationFetcher:
    """
    Calls the specification server action for a book page.

    Failures never propagate: transport and parse errors are logged and
    reported as None.

    Usage:
        fetcher = SpecificationFetcher(config)
        specs = fetcher.fetch(book_url, book_id)
    """

    def __init__(self, config: ScraperConfig, session: Optional[requests.Session] = None):
        """
        Initialize the fetcher.

        Args:
            config: Scraper configuration
            session: Shared requests session (a private one is created if None)
        """
        self.config = config
        self._owns_session = session is None
        self.session = session or requests.Session()

    def build_headers(self, book_url: str) -> Dict[str, str]:
        """Build the server action request headers for a book page."""
        parsed = urlparse(book_url)
        return {
            "accept": "text/x-component",
            "content-type": "text/plain;charset=UTF-8",
            "next-action": self.config.next_action_id,
            "origin": f"{parsed.scheme}://{parsed.netloc}",
            "referer": book_url,
            "user-agent": self.config.user_agent,
        }

    def fetch(self, book_url: str, book_id: Optional[str]) -> Optional[List[Any]]:
        """
        Fetch and parse the specifications of a book.

        Args:
            book_url: Book page URL (request target and referer)
            book_id: Numeric book ID from the URL

        Returns:
            Specification list, or None if there is no book ID or the call failed
        """
        if not book_id:
            logger.warning("No book ID provided for fetching specifications")
            return None

        payload = json.dumps([book_id])

        logger.info("Fetching specifications for book ID %s", book_id)
        try:
            response = self.session.post(
                book_url,
                data=payload.encode("utf-8"),
                headers=self.build_headers(book_url),
                timeout=self.config.request_timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error("Specification request failed for book ID %s: %s", book_id, e)
            status = getattr(getattr(e, "response", None), "status_code", None)
            if status is not None:
                logger.debug("Status: %s", status)
            return None

        # text/x-component carries no charset; requests would fall back to ISO-8859-1
        response.encoding = "utf-8"
        specs = parse_specifications(response.text, self.config.specification_marker)
        if specs is None:
            logger.warning("No specifications parsed for book ID %s", book_id)
        else:
            logger.info("Parsed %d specification entries", len(specs))
        return specs

    def close(self) -> None:
        """Close the session if this fetcher created it."""
        if self._owns_session:
            self.session.close()
