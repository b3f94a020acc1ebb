"""Tests for src/extraction/parsers/book_page_parser.py"""

from dataclasses import replace

from src.common.config_loader import BookSelectors
from src.extraction.parsers.book_page_parser import BookPageParser

HOST = "https://rokbucket.rokomari.io"


def make_parser(html: str, config) -> BookPageParser:
    """Create a BookPageParser from an HTML string."""
    return BookPageParser.from_html(html, config)


class TestExtractTitle:
    def test_title_trimmed(self, book_page_html, config):
        parser = make_parser(book_page_html, config)
        assert parser.extract_title() == "Masud Rana: Hacker 1 & 2"

    def test_missing_title_returns_none(self, config):
        parser = make_parser("<html><body><p>No title</p></body></html>", config)
        assert parser.extract_title() is None

    def test_first_match_used(self, config):
        html = """
        <div class="detailsBookContainer_bookName__pLCtW">First</div>
        <div class="detailsBookContainer_bookName__pLCtW">Second</div>
        """
        assert make_parser(html, config).extract_title() == "First"


class TestExtractSummary:
    def test_summary_trimmed(self, book_page_html, config):
        parser = make_parser(book_page_html, config)
        assert parser.extract_summary() == "A spy thriller."

    def test_empty_element_returns_empty_string(self, config):
        html = '<div class="productSummary_summeryText__Pd_tX">   </div>'
        assert make_parser(html, config).extract_summary() == ""


class TestExtractMainImage:
    def test_src_normalized(self, book_page_html, config):
        parser = make_parser(book_page_html, config)
        assert parser.extract_main_image() == f"{HOST}/ProductNew20190903/260X372/masud_rana-hacker.jpg"

    def test_lazy_src_fallback(self, config):
        html = f"""
        <div class="lookInside_imageContainer__A2WcA">
            <img data-src="{HOST}/book/70X100/lazy.jpg">
        </div>
        """
        assert make_parser(html, config).extract_main_image() == f"{HOST}/book/260X372/lazy.jpg"

    def test_missing_image_returns_none(self, config):
        assert make_parser("<html><body></body></html>", config).extract_main_image() is None

    def test_image_without_source_returns_none(self, config):
        html = '<div class="lookInside_imageContainer__A2WcA"><img alt="x"></div>'
        assert make_parser(html, config).extract_main_image() is None

    def test_uses_configured_dimensions(self, book_page_html, config):
        parser = make_parser(book_page_html, config.with_overrides(target_dimensions="520X744"))
        assert parser.extract_main_image() == f"{HOST}/ProductNew20190903/520X744/masud_rana-hacker.jpg"


class TestExtractListImages:
    def test_all_thumbnails_normalized(self, book_page_html, config):
        parser = make_parser(book_page_html, config)
        assert parser.extract_list_images() == [
            f"{HOST}/ProductNew20190903/260X372/thumb-1.jpg",
            f"{HOST}/ProductNew20190903/260X372/thumb-2.jpg",
        ]

    def test_no_thumbnails_returns_empty(self, config):
        assert make_parser("<html><body></body></html>", config).extract_list_images() == []

    def test_custom_selectors(self, config):
        custom = replace(config, selectors=BookSelectors(list_images="ul.gallery img"))
        html = f'<ul class="gallery"><li><img src="{HOST}/other/70X100/a.jpg"></li></ul>'
        assert make_parser(html, custom).extract_list_images() == [f"{HOST}/other/70X100/a.jpg"]
