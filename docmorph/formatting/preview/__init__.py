"""
Live preview of a document under a template.
"""

from .renderer import PreviewNode, PreviewRenderer, content_blocks, style_to_css
from .html_serializer import render_html

__all__ = [
    "PreviewNode",
    "PreviewRenderer",
    "content_blocks",
    "style_to_css",
    "render_html",
]
