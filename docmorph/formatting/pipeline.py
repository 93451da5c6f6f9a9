#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Formatting Pipeline - Resolve template, then preview or export.

Usage:
    pipeline = FormattingPipeline(TemplateRegistry())
    page = pipeline.preview(document, zoom=0.8)
    artifact = pipeline.export(document, ExportFormat.DOCX)
"""

from pathlib import Path
from typing import Dict, Optional, Union

from .document_model import RenderableDocument
from .export_service import default_exporters, export_document, write_artifact
from .exporters import BaseExporter, DocxStyleExporter, ExportArtifact, ExportFormat
from .preview import PreviewNode, PreviewRenderer, render_html
from .templates import Template, TemplateRegistry


class FormattingPipeline:
    """Ties the template registry, preview renderer and exporters together."""

    def __init__(
        self,
        registry: TemplateRegistry,
        renderer: Optional[PreviewRenderer] = None,
        exporters: Optional[Dict[ExportFormat, BaseExporter]] = None,
        output_dir: Optional[Path] = None,
    ):
        self.registry = registry
        self.renderer = renderer or PreviewRenderer()
        self.exporters = exporters or default_exporters()
        self.output_dir = Path(output_dir) if output_dir else None

    @classmethod
    def from_settings(cls, settings, registry: Optional[TemplateRegistry] = None):
        """Build a pipeline configured from a Settings instance."""
        registry = registry or TemplateRegistry(
            storage_path=settings.custom_templates_file,
            default_template_id=settings.default_template_id,
        )
        renderer = PreviewRenderer(
            default_zoom=settings.default_zoom,
            min_zoom=settings.min_zoom,
            max_zoom=settings.max_zoom,
        )
        exporters = default_exporters()
        exporters[ExportFormat.DOCX] = DocxStyleExporter(
            column_gap_twips=settings.column_gap_twips,
            space_after_twips=settings.paragraph_space_after_twips,
        )
        return cls(registry, renderer, exporters, output_dir=settings.output_dir)

    def resolve_template(self, document: RenderableDocument) -> Template:
        return self.registry.resolve(document.template_id)

    def preview(self, document: RenderableDocument, zoom: Optional[float] = None) -> PreviewNode:
        return self.renderer.render(document, self.resolve_template(document), zoom)

    def preview_html(self, document: RenderableDocument, zoom: Optional[float] = None) -> str:
        return render_html(self.preview(document, zoom))

    def export(
        self, document: RenderableDocument, export_format: Union[ExportFormat, str]
    ) -> ExportArtifact:
        return export_document(
            document, self.resolve_template(document), export_format, self.exporters
        )

    def export_to(
        self,
        document: RenderableDocument,
        export_format: Union[ExportFormat, str],
        directory: Optional[Union[str, Path]] = None,
    ) -> Path:
        """Export and write the artifact into ``directory`` (default: output_dir)."""
        directory = directory or self.output_dir
        if directory is None:
            raise ValueError("no output directory given and none configured")
        return write_artifact(self.export(document, export_format), directory)
