"""
Book data models.

Pure data classes for representing an extracted book page.
No business logic - only data structure definitions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class BookRecord:
    """
    Aggregated data for one book page.

    Created once per scrape and filled in step by step; any field whose
    extraction failed stays at its default.

    Field Groups:
    - Source: page URL and the numeric book ID taken from it
    - Page fields: title, summary and image URLs (normalized dimensions)
    - Specifications: key/value rows returned by the server action
    - Error: message of an unexpected failure that stopped the scrape
    """

    url: str
    book_id: Optional[str] = None

    title: Optional[str] = None
    summary: Optional[str] = None
    main_image: Optional[str] = None
    list_images: List[str] = field(default_factory=list)

    specifications: Optional[List[Any]] = None

    error: Optional[str] = None

    def __post_init__(self):
        """Validate required fields after initialization."""
        if not self.url:
            raise ValueError("Book URL is required")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the output key names."""
        return {
            "url": self.url,
            "bookId": self.book_id,
            "title": self.title,
            "summary": self.summary,
            "mainImage": self.main_image,
            "listImages": list(self.list_images),
            "specifications": self.specifications,
            "error": self.error,
        }
