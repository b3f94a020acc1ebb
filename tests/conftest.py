"""Shared test fixtures."""

import json

import pytest

from src.common.config_loader import ScraperConfig
from src.models import BookRecord

BOOK_URL = "https://www.rokomari.com/book/48659/masud-rana-hacker-1-and-2"

IMAGE_HOST = "https://rokbucket.rokomari.io"

BOOK_PAGE_HTML = f"""
<html><body>
<div class="detailsBookContainer_bookName__pLCtW">
    Masud Rana: Hacker 1 &amp; 2
</div>
<div class="productSummary_summeryText__Pd_tX">
    A spy thriller.
</div>
<div class="lookInside_imageContainer__A2WcA">
    <img src="{IMAGE_HOST}/ProductNew20190903/130X186/masud_rana-hacker.jpg" alt="cover">
</div>
<div class="bookImageThumbs_bookImageThumb__368gC">
    <img src="{IMAGE_HOST}/ProductNew20190903/70X100/thumb-1.jpg">
</div>
<div class="bookImageThumbs_bookImageThumb__368gC">
    <img data-src="{IMAGE_HOST}/ProductNew20190903/70X100/thumb-2.jpg">
</div>
<div class="bookImageThumbs_bookImageThumb__368gC">
    <img alt="no source">
</div>
</body></html>
"""

SPECIFICATIONS = [
    {"key": "Title", "value": "Masud Rana: Hacker 1 & 2"},
    {"key": "Author", "value": "Qazi Anwar Hussain"},
    {"key": "Publisher", "value": "Sheba Prokashoni"},
]


@pytest.fixture
def config():
    """Default scraper configuration."""
    return ScraperConfig()


@pytest.fixture
def book_url():
    return BOOK_URL


@pytest.fixture
def book_page_html():
    """HTML of a book page with title, summary and images."""
    return BOOK_PAGE_HTML


@pytest.fixture
def specifications():
    return [dict(spec) for spec in SPECIFICATIONS]


@pytest.fixture
def stream_response_body():
    """Streamed server action response with the specifications on row 1."""
    return '0:["$@1",["development",null]]\n1:' + json.dumps(SPECIFICATIONS) + "\n"


@pytest.fixture
def structured_response_body():
    """Server action response that is a two-element JSON array."""
    return json.dumps(["$@1", SPECIFICATIONS])


@pytest.fixture
def empty_record():
    return BookRecord(url=BOOK_URL, book_id="48659")
