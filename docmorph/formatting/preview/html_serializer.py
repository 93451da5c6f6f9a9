#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HTML Serializer - Turn a PreviewNode tree into an HTML fragment.

Styles are written inline; text and attribute values are escaped.
"""

import html

from ..utils.constants import ROLE_PAGE
from .renderer import PreviewNode


def _style_attr(style) -> str:
    return "; ".join(f"{name}: {value}" for name, value in style.items())


def render_html(node: PreviewNode) -> str:
    """Serialize ``node`` and its subtree."""
    attrs = [f'class="docmorph-{node.role}"']
    if node.section_id is not None:
        attrs.append(f'data-section-id="{html.escape(node.section_id, quote=True)}"')
    if node.style:
        attrs.append(f'style="{html.escape(_style_attr(node.style), quote=True)}"')

    inner = "".join(render_html(child) for child in node.children)
    if node.text is not None:
        inner += html.escape(node.text, quote=False)

    separator = "\n" if node.role == ROLE_PAGE else ""
    return f"<{node.tag} {' '.join(attrs)}>{separator}{inner}{separator}</{node.tag}>"
