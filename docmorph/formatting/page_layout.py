#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Page Layout Manager - Resolve a LayoutSpec into concrete page geometry.

Manages:
- Page sizes (A4, Letter, Legal) with orientation applied
- Margins in inches
"""

from dataclasses import dataclass

from .style_model import LayoutSpec
from .utils.constants import PAGE_SIZES


@dataclass(frozen=True)
class PageDimensions:
    """Page dimensions in millimetres."""
    width_mm: float
    height_mm: float


@dataclass(frozen=True)
class Margins:
    """Page margins in inches."""
    top: float
    bottom: float
    left: float
    right: float


class PageLayoutManager:
    """
    Resolve page geometry for a template layout.

    Usage:
        layout = PageLayoutManager(template.layout)
        dims = layout.page_size          # orientation applied
        margins = layout.margins
    """

    def __init__(self, layout: LayoutSpec):
        self.layout = layout

        size_config = PAGE_SIZES[layout.page_size.value]
        width, height = size_config["width_mm"], size_config["height_mm"]
        if layout.is_landscape:
            width, height = height, width
        self.page_size = PageDimensions(width_mm=width, height_mm=height)

        self.margins = Margins(
            top=layout.margin_top_in,
            bottom=layout.margin_bottom_in,
            left=layout.margin_left_in,
            right=layout.margin_right_in,
        )
        self.columns = layout.columns
