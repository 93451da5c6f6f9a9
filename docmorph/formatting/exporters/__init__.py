#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Exporters - Encode documents to plain text, Markdown and DOCX.
"""

from .base import BaseExporter, ExportArtifact, ExportFormat, sanitize_filename
from .docx_exporter import DocxStyleExporter, encode_docx
from .markdown_exporter import MarkdownStyleExporter, encode_markdown, to_markdown
from .text_exporter import PlainTextExporter, encode_plain_text, to_plain_text

__all__ = [
    "BaseExporter",
    "ExportArtifact",
    "ExportFormat",
    "sanitize_filename",
    "DocxStyleExporter",
    "MarkdownStyleExporter",
    "PlainTextExporter",
    "encode_docx",
    "encode_markdown",
    "encode_plain_text",
    "to_markdown",
    "to_plain_text",
]
