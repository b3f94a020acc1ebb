# Common utilities
from .config_loader import (
    BookSelectors,
    ScraperConfig,
    build_scraper_config,
    load_config,
    load_scraper_config,
)
from .log_config import setup_logging
