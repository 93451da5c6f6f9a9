#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Constants for the formatting pipeline.
"""

# =============================================================================
# PAGE SIZES (portrait)
# =============================================================================

PAGE_SIZES = {
    "A4": {"width_mm": 210.0, "height_mm": 297.0},
    "Letter": {"width_mm": 215.9, "height_mm": 279.4},
    "Legal": {"width_mm": 215.9, "height_mm": 355.6},
}


# =============================================================================
# PREVIEW TAGS
# =============================================================================

# Section type -> block tag; everything else renders as a paragraph
SECTION_TAGS = {
    "h1": "h1",
    "h2": "h2",
    "h3": "h3",
}
DEFAULT_BLOCK_TAG = "p"

# Node roles in the preview tree
ROLE_PAGE = "page"
ROLE_LOGO = "logo"
ROLE_HEADER = "header"
ROLE_CONTENT = "content"
ROLE_BLOCK = "block"
ROLE_EMPTY_STATE = "empty-state"
ROLE_FOOTER = "footer"


# =============================================================================
# MARKDOWN
# =============================================================================

MARKDOWN_HEADING_PREFIXES = {
    "h1": "# ",
    "h2": "## ",
    "h3": "### ",
}

SECTION_SEPARATOR = "\n\n"
