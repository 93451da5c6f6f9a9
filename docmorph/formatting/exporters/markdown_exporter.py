#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Markdown Style Exporter - Export a document to Markdown.

Supports:
- Heading levels (#, ##, ###) for h1-h3 sections
- Every other section type as an unprefixed paragraph
"""

from typing import Iterable, Optional

from ..document_model import RenderableDocument, Section
from ..templates.base_template import Template
from ..utils.constants import MARKDOWN_HEADING_PREFIXES, SECTION_SEPARATOR
from .base import BaseExporter, ExportArtifact, ExportFormat


def section_to_markdown(section: Section) -> str:
    prefix = MARKDOWN_HEADING_PREFIXES.get(section.type.value, "")
    return f"{prefix}{section.content}"


def to_markdown(sections: Iterable[Section]) -> str:
    """One Markdown segment per section, separated by a blank line."""
    return SECTION_SEPARATOR.join(section_to_markdown(s) for s in sections)


class MarkdownStyleExporter(BaseExporter):
    """
    Export a document to Markdown.

    Usage:
        exporter = MarkdownStyleExporter()
        artifact = exporter.export(document)
        artifact.filename   # "My_Doc.md"
    """

    export_format = ExportFormat.MD

    def encode(self, document: RenderableDocument, template: Optional[Template] = None) -> bytes:
        return to_markdown(document.sections).encode("utf-8")


def encode_markdown(
    document: RenderableDocument, template: Optional[Template] = None
) -> ExportArtifact:
    return MarkdownStyleExporter().export(document, template)
