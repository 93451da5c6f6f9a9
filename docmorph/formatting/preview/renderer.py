#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Preview Renderer - Build a styled box tree approximating the printed page.

The tree is a single continuous page:

    page (scaled by zoom)
    ├── logo          (top-center logo only)
    ├── header        "{title} - Draft"
    ├── content       column flow, one block per section
    └── footer        "Page 1" when page numbers are enabled

Only the page transform depends on zoom; the number and order of content
blocks always equal the document's sections. The preview does not
paginate: the header and footer are decorative.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from config.constants import (
    DEFAULT_LINE_HEIGHT,
    DEFAULT_ZOOM,
    EMPTY_STATE_TEXT,
    HEADER_SUFFIX,
    LOGO_PLACEHOLDER,
    MAX_ZOOM,
    MIN_ZOOM,
    PAGE_INDICATOR_TEXT,
    PREVIEW_COLUMN_GAP,
)
from config.logging_config import get_logger

from ..document_model import RenderableDocument, Section
from ..page_layout import PageLayoutManager
from ..style_model import StyleSpec
from ..templates.base_template import LogoPosition, Template
from ..utils.constants import (
    DEFAULT_BLOCK_TAG,
    ROLE_BLOCK,
    ROLE_CONTENT,
    ROLE_EMPTY_STATE,
    ROLE_FOOTER,
    ROLE_HEADER,
    ROLE_LOGO,
    ROLE_PAGE,
    SECTION_TAGS,
)

logger = get_logger(__name__)


# =============================================================================
# PREVIEW TREE
# =============================================================================

@dataclass(frozen=True)
class PreviewNode:
    """
    One styled box of the preview.

    ``style`` holds CSS property names and values. When a node has both
    children and text, the children are drawn first.
    """
    tag: str
    role: str
    style: Dict[str, str] = field(default_factory=dict)
    text: Optional[str] = None
    children: Tuple["PreviewNode", ...] = ()
    section_id: Optional[str] = None

    def find(self, role: str) -> Optional["PreviewNode"]:
        """First node with ``role`` in depth-first order (self included)."""
        if self.role == role:
            return self
        for child in self.children:
            found = child.find(role)
            if found is not None:
                return found
        return None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"tag": self.tag, "role": self.role, "style": dict(self.style)}
        if self.text is not None:
            data["text"] = self.text
        if self.section_id is not None:
            data["sectionId"] = self.section_id
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


def content_blocks(page: PreviewNode) -> List[PreviewNode]:
    """Section blocks of a rendered page, in reading order."""
    content = page.find(ROLE_CONTENT)
    if content is None:
        return []
    return [child for child in content.children if child.role == ROLE_BLOCK]


def _num(value: float) -> str:
    return f"{value:g}"


def style_to_css(style: StyleSpec) -> Dict[str, str]:
    """Full block style for a content section."""
    css = {
        "font-family": style.family,
        "font-size": f"{_num(style.size_pt)}pt",
        "font-weight": "bold" if style.bold else "normal",
        "font-style": "italic" if style.italic else "normal",
        "color": style.color_hex,
        "text-align": style.alignment.value,
        "line-height": _num(style.line_spacing or DEFAULT_LINE_HEIGHT),
    }
    if style.uppercase:
        css["text-transform"] = "uppercase"
    return css


def _band_css(style: StyleSpec, align: str) -> Dict[str, str]:
    """Header/footer bands only take family, size and color."""
    return {
        "font-family": style.family,
        "font-size": f"{_num(style.size_pt)}pt",
        "color": style.color_hex,
        "text-align": align,
    }


# =============================================================================
# RENDERER
# =============================================================================

class PreviewRenderer:
    """
    Render a document with a template into a PreviewNode tree.

    Usage:
        renderer = PreviewRenderer()
        page = renderer.render(document, template, zoom=0.8)
        blocks = content_blocks(page)

    The renderer remembers the last applied zoom; ``render`` without a
    zoom reuses it.
    """

    def __init__(
        self,
        default_zoom: float = DEFAULT_ZOOM,
        min_zoom: float = MIN_ZOOM,
        max_zoom: float = MAX_ZOOM,
    ):
        if min_zoom <= 0 or min_zoom > max_zoom:
            raise ValueError(f"invalid zoom range [{min_zoom}, {max_zoom}]")
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.zoom = self.clamp_zoom(default_zoom)

    def clamp_zoom(self, zoom: float) -> float:
        return min(self.max_zoom, max(self.min_zoom, float(zoom)))

    def set_zoom(self, zoom: float) -> float:
        """Apply a zoom factor (clamped) and return the effective value."""
        clamped = self.clamp_zoom(zoom)
        if clamped != zoom:
            logger.debug("Zoom %s clamped to %s", zoom, clamped)
        self.zoom = clamped
        return clamped

    def render(
        self,
        document: RenderableDocument,
        template: Template,
        zoom: Optional[float] = None,
    ) -> PreviewNode:
        """Build the preview tree for one document."""
        if zoom is not None:
            self.set_zoom(zoom)

        children: List[PreviewNode] = []

        logo_position = template.elements.logo_position
        if logo_position is LogoPosition.TOP_CENTER:
            children.append(
                PreviewNode(
                    tag="div",
                    role=ROLE_LOGO,
                    style={"text-align": "center"},
                    text=LOGO_PLACEHOLDER,
                )
            )

        children.append(self._render_header(document, template))
        children.append(self._render_content(document, template))

        if template.elements.show_page_numbers:
            children.append(
                PreviewNode(
                    tag="div",
                    role=ROLE_FOOTER,
                    style=_band_css(template.styles.footer, "center"),
                    text=PAGE_INDICATOR_TEXT,
                )
            )

        page = PreviewNode(
            tag="div",
            role=ROLE_PAGE,
            style=self._page_css(template),
            children=tuple(children),
        )
        logger.debug(
            "Rendered preview: %d sections, template=%s, zoom=%s",
            len(document), template.id, self.zoom,
        )
        return page

    # ------------------------------------------------------------------

    def _page_css(self, template: Template) -> Dict[str, str]:
        layout = PageLayoutManager(template.layout)
        margins = layout.margins
        return {
            "width": f"{round(layout.page_size.width_mm)}mm",
            "min-height": f"{round(layout.page_size.height_mm)}mm",
            "padding": (
                f"{_num(margins.top)}in {_num(margins.right)}in "
                f"{_num(margins.bottom)}in {_num(margins.left)}in"
            ),
            "transform": f"scale({_num(self.zoom)})",
            "transform-origin": "top",
        }

    def _render_header(self, document: RenderableDocument, template: Template) -> PreviewNode:
        text = f"{document.title}{HEADER_SUFFIX}"
        children: Tuple[PreviewNode, ...] = ()

        position = template.elements.logo_position
        if position is LogoPosition.HEADER_RIGHT:
            text = f"{LOGO_PLACEHOLDER} {text}"
        elif position is LogoPosition.HEADER_LEFT:
            children = (
                PreviewNode(tag="span", role=ROLE_LOGO, style={"float": "left"}, text=LOGO_PLACEHOLDER),
            )

        return PreviewNode(
            tag="div",
            role=ROLE_HEADER,
            style=_band_css(template.styles.header, "right"),
            text=text,
            children=children,
        )

    def _render_content(self, document: RenderableDocument, template: Template) -> PreviewNode:
        style = {
            "column-count": str(template.layout.columns),
            "column-gap": PREVIEW_COLUMN_GAP,
        }

        if document.is_empty:
            blocks = (
                PreviewNode(
                    tag=DEFAULT_BLOCK_TAG,
                    role=ROLE_EMPTY_STATE,
                    style={"text-align": "center", "color": "#999999"},
                    text=EMPTY_STATE_TEXT,
                ),
            )
        else:
            blocks = tuple(self._render_block(section, template) for section in document.sections)

        return PreviewNode(tag="div", role=ROLE_CONTENT, style=style, children=blocks)

    def _render_block(self, section: Section, template: Template) -> PreviewNode:
        return PreviewNode(
            tag=SECTION_TAGS.get(section.type.value, DEFAULT_BLOCK_TAG),
            role=ROLE_BLOCK,
            style=style_to_css(template.style_for(section.type)),
            text=section.content,
            section_id=section.id,
        )
