#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
System Templates - Built-in templates seeded into every registry.

Templates:
- tpl-ieee: Academic / IEEE two-column paper (the default)
- tpl-corp: Modern corporate report
- tpl-legal: Legal contract
- tpl-creative: Creative brief
- tpl-tech: Technical specification
- tpl-markdown: Markdown / documentation
"""

from typing import Tuple

from ..style_model import Alignment, LayoutSpec, Orientation, PageSize, StyleSpec
from .base_template import LogoPosition, Template, TemplateElements, TemplateStyles


def _style(family, size, color, alignment="left", bold=False, italic=False,
           spacing=None, uppercase=False) -> StyleSpec:
    return StyleSpec(
        family=family,
        size_pt=size,
        bold=bold,
        italic=italic,
        color_hex=color,
        alignment=Alignment(alignment),
        line_spacing=spacing,
        uppercase=uppercase,
    )


def _layout(page_size, top, bottom, left, right, columns=1) -> LayoutSpec:
    return LayoutSpec(
        page_size=PageSize(page_size),
        orientation=Orientation.PORTRAIT,
        margin_top_in=top,
        margin_bottom_in=bottom,
        margin_left_in=left,
        margin_right_in=right,
        columns=columns,
    )


IEEE_TEMPLATE = Template(
    id="tpl-ieee",
    name="Academic / IEEE Standard",
    description="Double column, serif font, strict formatting for research papers.",
    is_system=True,
    layout=_layout("A4", 0.75, 0.75, 0.6, 0.6, columns=2),
    styles=TemplateStyles(
        h1=_style("Times New Roman", 24, "#000000", "center", bold=True, uppercase=True),
        h2=_style("Times New Roman", 10, "#000000", bold=True, uppercase=True),
        h3=_style("Times New Roman", 10, "#000000", italic=True),
        body=_style("Times New Roman", 10, "#000000", "justify", spacing=1.1),
        caption=_style("Times New Roman", 8, "#444444", "center"),
        header=_style("Arial", 8, "#888888", "right"),
        footer=_style("Arial", 8, "#888888", "center"),
    ),
    elements=TemplateElements(show_page_numbers=True, show_toc=False),
)

CORPORATE_TEMPLATE = Template(
    id="tpl-corp",
    name="Modern Corporate Report",
    description="Clean sans-serif look with generous spacing and brand colors.",
    is_system=True,
    layout=_layout("Letter", 1, 1, 1, 1),
    styles=TemplateStyles(
        h1=_style("Helvetica", 28, "#2563eb", bold=True),
        h2=_style("Helvetica", 18, "#1e40af", bold=True),
        h3=_style("Helvetica", 14, "#475569", bold=True),
        body=_style("Georgia", 11, "#334155", spacing=1.5),
        caption=_style("Helvetica", 9, "#64748b", italic=True),
        header=_style("Helvetica", 9, "#94a3b8", "right"),
        footer=_style("Helvetica", 9, "#94a3b8", "center"),
    ),
    elements=TemplateElements(
        show_page_numbers=True,
        show_toc=True,
        logo_position=LogoPosition.HEADER_RIGHT,
    ),
)

LEGAL_TEMPLATE = Template(
    id="tpl-legal",
    name="Legal Contract",
    description="Formal, single column, highly readable for agreements and contracts.",
    is_system=True,
    layout=_layout("Letter", 1, 1, 1.25, 1.25),
    styles=TemplateStyles(
        h1=_style("Times New Roman", 16, "#000000", "center", bold=True, uppercase=True),
        h2=_style("Times New Roman", 14, "#000000", bold=True),
        h3=_style("Times New Roman", 12, "#000000", bold=True),
        body=_style("Times New Roman", 12, "#000000", "justify", spacing=1.5),
        caption=_style("Times New Roman", 10, "#000000", "center", italic=True),
        header=_style("Times New Roman", 10, "#666666", "right"),
        footer=_style("Times New Roman", 10, "#666666", "center"),
    ),
    elements=TemplateElements(show_page_numbers=True, show_toc=False),
)

CREATIVE_TEMPLATE = Template(
    id="tpl-creative",
    name="Creative Brief",
    description="Bold typography and vibrant accents for marketing and design docs.",
    is_system=True,
    layout=_layout("A4", 0.5, 0.5, 0.5, 0.5),
    styles=TemplateStyles(
        h1=_style("Arial Black", 36, "#db2777", bold=True, uppercase=True),
        h2=_style("Arial", 24, "#be185d", bold=True),
        h3=_style("Arial", 18, "#9d174d", bold=True),
        body=_style("Verdana", 10, "#1f2937", spacing=1.4),
        caption=_style("Verdana", 9, "#6b7280", italic=True),
        header=_style("Verdana", 9, "#db2777", bold=True),
        footer=_style("Verdana", 9, "#9ca3af", "right"),
    ),
    elements=TemplateElements(show_page_numbers=True, show_toc=False),
)

TECH_SPEC_TEMPLATE = Template(
    id="tpl-tech",
    name="Technical Specification",
    description="Monospace headers and clean hierarchy for engineering documents.",
    is_system=True,
    layout=_layout("A4", 1, 1, 1, 1),
    styles=TemplateStyles(
        h1=_style("Courier New", 24, "#0f172a", bold=True),
        h2=_style("Courier New", 18, "#334155", bold=True),
        h3=_style("Courier New", 14, "#475569", bold=True),
        body=_style("Segoe UI", 11, "#334155", spacing=1.3),
        caption=_style("Segoe UI", 9, "#64748b", "center", italic=True),
        header=_style("Courier New", 9, "#94a3b8", "right"),
        footer=_style("Courier New", 9, "#94a3b8", "center"),
    ),
    elements=TemplateElements(show_page_numbers=True, show_toc=True),
)

MARKDOWN_TEMPLATE = Template(
    id="tpl-markdown",
    name="Markdown / Documentation",
    description="Monospace font with markdown-like styling for technical docs.",
    is_system=True,
    layout=_layout("A4", 1, 1, 1, 1),
    styles=TemplateStyles(
        h1=_style("Courier New", 24, "#000000", bold=True),
        h2=_style("Courier New", 20, "#000000", bold=True),
        h3=_style("Courier New", 16, "#000000", bold=True),
        body=_style("Courier New", 10, "#333333", spacing=1.2),
        caption=_style("Courier New", 9, "#666666", italic=True),
        header=_style("Courier New", 8, "#888888", "right"),
        footer=_style("Courier New", 8, "#888888", "center"),
    ),
    elements=TemplateElements(show_page_numbers=True, show_toc=True),
)

# Seed order is the listing order; the first entry is the default template
SYSTEM_TEMPLATES: Tuple[Template, ...] = (
    IEEE_TEMPLATE,
    CORPORATE_TEMPLATE,
    LEGAL_TEMPLATE,
    CREATIVE_TEMPLATE,
    TECH_SPEC_TEMPLATE,
    MARKDOWN_TEMPLATE,
)
