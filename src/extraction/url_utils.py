"""
URL Utilities

Helpers for pulling the book ID out of a page URL and rewriting the
embedded dimension token of image URLs.
"""

import logging
from typing import Any, Optional, Pattern

from ..common.constants import BOOK_ID_PATTERN, DIMENSION_PATTERN, TARGET_DIMENSIONS

logger = logging.getLogger(__name__)


def extract_book_id(url: Any, pattern: Pattern = BOOK_ID_PATTERN) -> Optional[str]:
    """
    Extract the numeric book ID from a page URL.

    Args:
        url: Book page URL, e.g. https://www.rokomari.com/book/48659/title
        pattern: Regex with the ID as its first group

    Returns:
        Book ID digits, or None if the URL has no /book/<digits>/ segment
    """
    if not isinstance(url, str):
        return None

    match = pattern.search(url)
    return match.group(1) if match else None


def normalize_image_url(
    url: Any,
    target_dimensions: str = TARGET_DIMENSIONS,
    dimension_pattern: Pattern = DIMENSION_PATTERN,
) -> Any:
    """
    Rewrite the <width>X<height> token of an image URL to target_dimensions.

    Only the first matching path segment is rewritten. URLs that don't
    match, already carry the target size, or aren't strings are returned
    unchanged.

    Example:
        .../ProductNew20190903/100X150/abc.jpg -> .../ProductNew20190903/260X372/abc.jpg

    Args:
        url: Image URL (may be None or empty)
        target_dimensions: Wanted token, e.g. "260X372"
        dimension_pattern: Regex with groups (prefix marker, dimension, suffix)

    Returns:
        Normalized URL
    """
    if not url or not isinstance(url, str):
        return url

    match = dimension_pattern.search(url)
    if not match:
        return url

    prefix, dimensions, suffix = match.group(1), match.group(2), match.group(3)
    if dimensions.upper() == target_dimensions.upper():
        return url

    normalized = url[:match.start(1)] + prefix + target_dimensions + suffix
    logger.debug("Image URL %s -> %s", url, normalized)
    return normalized
