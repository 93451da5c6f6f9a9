#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Plain Text Exporter - Section contents separated by blank lines.
"""

from typing import Iterable, Optional

from ..document_model import RenderableDocument, Section
from ..templates.base_template import Template
from ..utils.constants import SECTION_SEPARATOR
from .base import BaseExporter, ExportArtifact, ExportFormat


def to_plain_text(sections: Iterable[Section]) -> str:
    """Join section contents with one blank line; no headings markup."""
    return SECTION_SEPARATOR.join(section.content for section in sections)


class PlainTextExporter(BaseExporter):
    """
    Export a document as UTF-8 text.

    The template is accepted for a uniform interface and ignored.
    """

    export_format = ExportFormat.TXT

    def encode(self, document: RenderableDocument, template: Optional[Template] = None) -> bytes:
        return to_plain_text(document.sections).encode("utf-8")


def encode_plain_text(
    document: RenderableDocument, template: Optional[Template] = None
) -> ExportArtifact:
    return PlainTextExporter().export(document, template)
