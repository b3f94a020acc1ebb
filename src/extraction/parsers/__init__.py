"""
Parsers for book page data.

- BookPageParser: HTML element extraction (title, summary, images)
- parse_specifications: server action response bodies
"""

from .book_page_parser import BookPageParser
from .specification_parser import parse_specifications

__all__ = [
    'BookPageParser',
    'parse_specifications',
]
