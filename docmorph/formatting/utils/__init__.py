"""
Formatting utilities.
"""

from .constants import (
    PAGE_SIZES,
    SECTION_TAGS,
    DEFAULT_BLOCK_TAG,
    MARKDOWN_HEADING_PREFIXES,
    SECTION_SEPARATOR,
)

__all__ = [
    "PAGE_SIZES",
    "SECTION_TAGS",
    "DEFAULT_BLOCK_TAG",
    "MARKDOWN_HEADING_PREFIXES",
    "SECTION_SEPARATOR",
]
