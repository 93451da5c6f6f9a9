#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exporter base types - formats, artifacts and file naming.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from config.constants import FALLBACK_FILENAME

from ..document_model import RenderableDocument
from ..templates.base_template import Template


class ExportFormat(str, Enum):
    """Supported export formats."""
    TXT = "txt"
    MD = "md"
    DOCX = "docx"

    @property
    def media_type(self) -> str:
        return MEDIA_TYPES[self]


MEDIA_TYPES = {
    ExportFormat.TXT: "text/plain; charset=utf-8",
    ExportFormat.MD: "text/markdown; charset=utf-8",
    ExportFormat.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

# Characters rejected by common file systems, plus control characters
_ILLEGAL_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')
_WHITESPACE_RUN = re.compile(r"\s+")


def sanitize_filename(title: Optional[str]) -> str:
    """
    Derive a file name stem from a document title.

    Whitespace runs become a single underscore; characters that are not
    allowed in file names are dropped.

        >>> sanitize_filename("Quarterly  Report: Q3")
        'Quarterly_Report_Q3'
    """
    stem = _WHITESPACE_RUN.sub("_", title or "")
    stem = _ILLEGAL_FILENAME_CHARS.sub("", stem)
    stem = stem.strip(".")
    return stem or FALLBACK_FILENAME


@dataclass(frozen=True)
class ExportArtifact:
    """Encoded document ready to be downloaded or written."""
    filename: str
    content: bytes
    export_format: ExportFormat

    @property
    def media_type(self) -> str:
        return self.export_format.media_type

    @property
    def size(self) -> int:
        return len(self.content)


class BaseExporter(ABC):
    """
    Stateless encoder for one export format.

    Subclasses implement ``encode``; the same document and template
    always produce the same bytes.
    """

    export_format: ExportFormat
    filename_suffix: str = ""

    def filename_for(self, document: RenderableDocument) -> str:
        stem = sanitize_filename(document.title)
        return f"{stem}{self.filename_suffix}.{self.export_format.value}"

    @abstractmethod
    def encode(self, document: RenderableDocument, template: Optional[Template] = None) -> bytes:
        """Encode the document into the format's bytes."""

    def export(
        self, document: RenderableDocument, template: Optional[Template] = None
    ) -> ExportArtifact:
        return ExportArtifact(
            filename=self.filename_for(document),
            content=self.encode(document, template),
            export_format=self.export_format,
        )
