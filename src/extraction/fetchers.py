"""
Page Fetchers

Interchangeable ways of getting the HTML of a book page:
- HttpPageFetcher: plain GET with requests
- BrowserPageFetcher: Chromium via Playwright, for client-rendered content

Both return HTML, so field extraction is shared (see BookPageParser).
"""

import logging
from typing import Optional

import requests
from playwright.sync_api import sync_playwright

from ..common.config_loader import ScraperConfig

logger = logging.getLogger(__name__)


class PageFetcher:
    """Base class for page fetchers. Usable as a context manager."""

    name = "base"

    def __init__(self, config: ScraperConfig):
        self.config = config

    def fetch(self, url: str) -> str:
        """Return the HTML of the page at url."""
        raise NotImplementedError

    def close(self) -> None:
        """Release any resources held by the fetcher."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class HttpPageFetcher(PageFetcher):
    """Fetches raw page HTML over HTTP."""

    name = "http"

    def __init__(self, config: ScraperConfig, session: Optional[requests.Session] = None):
        super().__init__(config)
        self._owns_session = session is None
        self.session = session or requests.Session()

    def fetch(self, url: str) -> str:
        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "bn-BD,bn;q=0.9,en;q=0.8",
        }
        logger.info("Fetching page HTML from %s", url)
        response = self.session.get(url, headers=headers, timeout=self.config.request_timeout)
        response.raise_for_status()
        return response.text

    def close(self) -> None:
        if self._owns_session:
            self.session.close()


class BrowserPageFetcher(PageFetcher):
    """
    Fetches rendered page HTML with a headless Chromium browser.

    Navigation waits for the network to go idle so client-rendered
    content has settled. A browser is launched per fetch and always
    closed before returning, on success or failure.
    """

    name = "browser"

    def fetch(self, url: str) -> str:
        logger.info("Rendering page %s in browser", url)
        with sync_playwright() as playwright:
            browser = playwright.chromium.launch(headless=self.config.browser_headless)
            try:
                page = browser.new_page(user_agent=self.config.user_agent)
                page.goto(
                    url,
                    wait_until="networkidle",
                    timeout=self.config.navigation_timeout_ms,
                )
                return page.content()
            finally:
                browser.close()
                logger.debug("Browser closed")


FETCHERS = {
    HttpPageFetcher.name: HttpPageFetcher,
    BrowserPageFetcher.name: BrowserPageFetcher,
}


def create_page_fetcher(
    config: ScraperConfig,
    session: Optional[requests.Session] = None,
) -> PageFetcher:
    """
    Create the page fetcher selected by config.fetcher.

    Args:
        config: Scraper configuration
        session: requests session for the HTTP fetcher

    Returns:
        PageFetcher instance

    Raises:
        ValueError: If the fetcher name is not supported
    """
    fetcher_class = FETCHERS.get(config.fetcher)
    if fetcher_class is None:
        supported = ', '.join(FETCHERS)
        raise ValueError(f"Unsupported fetcher: {config.fetcher}. Supported: {supported}")

    if fetcher_class is HttpPageFetcher:
        return HttpPageFetcher(config, session=session)
    return fetcher_class(config)
