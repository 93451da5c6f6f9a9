#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Formatting Core

Renders typed document sections under a template into a live preview
and exports them to plain text, Markdown and DOCX.

Stages:
1. Model - StyleSpec / LayoutSpec / Template and the section sequence
2. Lookup - TemplateRegistry resolves a document's template id
3. Preview - PreviewRenderer builds a styled box tree (and HTML)
4. Export - Stateless encoders produce ExportArtifacts
"""

__version__ = "1.0.0"

# Stage 1: Model
from .style_model import Alignment, LayoutSpec, Orientation, PageSize, StyleSpec
from .document_model import (
    ImageMetadata,
    ListMetadata,
    RenderableDocument,
    Section,
    SectionType,
    TableMetadata,
)
from .exceptions import (
    DocMorphError,
    DocumentValidationError,
    ExportError,
    SystemTemplateError,
    TemplateNotFoundError,
    TemplateStorageError,
    TemplateValidationError,
    ValidationError,
)

# Page Layout
from .page_layout import Margins, PageDimensions, PageLayoutManager

# Stage 2: Templates
from .templates import (
    SYSTEM_TEMPLATES,
    LogoPosition,
    Template,
    TemplateElements,
    TemplateRegistry,
    TemplateStyles,
)

# Stage 3: Preview
from .preview import PreviewNode, PreviewRenderer, content_blocks, render_html

# Stage 4: Export
from .exporters import (
    DocxStyleExporter,
    ExportArtifact,
    ExportFormat,
    MarkdownStyleExporter,
    PlainTextExporter,
    encode_docx,
    encode_markdown,
    encode_plain_text,
    sanitize_filename,
)
from .export_service import export_document, write_artifact
from .pipeline import FormattingPipeline

__all__ = [
    # Model
    "Alignment",
    "LayoutSpec",
    "Orientation",
    "PageSize",
    "StyleSpec",
    "ImageMetadata",
    "ListMetadata",
    "RenderableDocument",
    "Section",
    "SectionType",
    "TableMetadata",
    # Errors
    "DocMorphError",
    "DocumentValidationError",
    "ExportError",
    "SystemTemplateError",
    "TemplateNotFoundError",
    "TemplateStorageError",
    "TemplateValidationError",
    "ValidationError",
    # Layout
    "Margins",
    "PageDimensions",
    "PageLayoutManager",
    # Templates
    "SYSTEM_TEMPLATES",
    "LogoPosition",
    "Template",
    "TemplateElements",
    "TemplateRegistry",
    "TemplateStyles",
    # Preview
    "PreviewNode",
    "PreviewRenderer",
    "content_blocks",
    "render_html",
    # Export
    "DocxStyleExporter",
    "ExportArtifact",
    "ExportFormat",
    "MarkdownStyleExporter",
    "PlainTextExporter",
    "encode_docx",
    "encode_markdown",
    "encode_plain_text",
    "sanitize_filename",
    "export_document",
    "write_artifact",
    "FormattingPipeline",
]
