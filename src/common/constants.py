"""
Shared constants for the project.

This module contains application-wide constants that should have a single source of truth.
"""

import re

DEFAULT_BOOK_URL = "https://www.rokomari.com/book/48659/masud-rana-hacker-1-and-2"

# Image hosting path segments carrying an embedded <width>X<height> token
TARGET_DIMENSIONS = "260X372"
DIMENSION_PATTERN = re.compile(
    r"(/(?:ProductNew\d+|product|book|Content)/)(\d+X\d+)(/.*)",
    re.IGNORECASE,
)

BOOK_ID_PATTERN = re.compile(r"/book/(\d+)/")

# Server action that serves the specification table of a book page
NEXT_ACTION_ID = "28417b2a8c56565e7953dccc20653cea74746d3a"

# Row prefix of the specification array in the streamed action response
SPECIFICATION_MARKER = "1:["

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
