"""
Configuration Loader

Loads the YAML scraper configuration and turns it into an immutable
ScraperConfig value that is passed into every component.
"""

import re
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Pattern

import yaml

from .constants import (
    BOOK_ID_PATTERN,
    DEFAULT_BOOK_URL,
    DEFAULT_USER_AGENT,
    DIMENSION_PATTERN,
    NEXT_ACTION_ID,
    SPECIFICATION_MARKER,
    TARGET_DIMENSIONS,
)

DEFAULT_CONFIG_FILE = 'scraper.yaml'
FETCHER_NAMES = ('http', 'browser')


@dataclass(frozen=True)
class BookSelectors:
    """CSS selectors for the fields of a book page."""
    title: str = '.detailsBookContainer_bookName__pLCtW'
    summary: str = '.productSummary_summeryText__Pd_tX'
    main_image: str = '.lookInside_imageContainer__A2WcA img'
    list_images: str = '.bookImageThumbs_bookImageThumb__368gC img'


@dataclass(frozen=True)
class ScraperConfig:
    """
    Immutable scraper settings.

    Field Groups:
    - Extraction: selectors, image dimension rewriting, book ID pattern
    - Upstream: server action identifier and stream marker for specifications
    - HTTP: user agent and timeout
    - Fetching: which page fetcher to use and browser options
    """

    selectors: BookSelectors = field(default_factory=BookSelectors)
    target_dimensions: str = TARGET_DIMENSIONS
    dimension_pattern: Pattern = DIMENSION_PATTERN
    book_id_pattern: Pattern = BOOK_ID_PATTERN
    lazy_src_attribute: str = 'data-src'

    next_action_id: str = NEXT_ACTION_ID
    specification_marker: str = SPECIFICATION_MARKER

    user_agent: str = DEFAULT_USER_AGENT
    request_timeout: float = 30

    fetcher: str = 'http'
    browser_headless: bool = True
    navigation_timeout_ms: int = 60000

    default_url: str = DEFAULT_BOOK_URL

    def __post_init__(self):
        if self.fetcher not in FETCHER_NAMES:
            raise ValueError(
                f"Unknown fetcher: {self.fetcher!r}. Expected one of: {', '.join(FETCHER_NAMES)}"
            )

    def with_overrides(self, **overrides: Any) -> 'ScraperConfig':
        """Return a copy with the given fields replaced (None values are ignored)."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file from the config directory.

    Args:
        filename: Name of the config file (e.g., 'scraper.yaml')

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    return _read_yaml(_get_config_dir() / filename)


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")
    return data


def build_scraper_config(data: Dict[str, Any]) -> ScraperConfig:
    """
    Build a ScraperConfig from a plain dictionary.

    Pattern keys accept regex strings; selectors accept a partial mapping.

    Raises:
        ValueError: On unknown keys or an invalid fetcher name
    """
    known = {f.name for f in fields(ScraperConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    values = dict(data)

    if 'selectors' in values:
        selector_data = values['selectors'] or {}
        selector_names = {f.name for f in fields(BookSelectors)}
        bad = set(selector_data) - selector_names
        if bad:
            raise ValueError(f"Unknown selector keys: {', '.join(sorted(bad))}")
        values['selectors'] = BookSelectors(**selector_data)

    # Dimension tokens look like 260X372 and are matched case-insensitively
    if isinstance(values.get('dimension_pattern'), str):
        values['dimension_pattern'] = re.compile(values['dimension_pattern'], re.IGNORECASE)
    if isinstance(values.get('book_id_pattern'), str):
        values['book_id_pattern'] = re.compile(values['book_id_pattern'])

    return ScraperConfig(**values)


def load_scraper_config(path: Optional[str] = None) -> ScraperConfig:
    """
    Load scraper configuration.

    Args:
        path: Explicit YAML file path. If None, uses config/scraper.yaml
            when present and built-in defaults otherwise.

    Returns:
        ScraperConfig instance

    Raises:
        FileNotFoundError: If an explicit path doesn't exist
        ValueError: If the file contains invalid settings
    """
    if path is not None:
        return build_scraper_config(_read_yaml(Path(path)))

    try:
        data = load_config(DEFAULT_CONFIG_FILE)
    except FileNotFoundError:
        return ScraperConfig()

    return build_scraper_config(data)
