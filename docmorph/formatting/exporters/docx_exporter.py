#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
DOCX Style Exporter - Export a document to Microsoft Word format.

Uses python-docx library for DOCX generation.
Supports:
- Page size, orientation, margins and column count from the template layout
- Built-in Heading 1-3 styles for headings (TOC compatible)
- Body text with the template's typography
- Header with the document title, footer with a PAGE field
- Table of Contents field

Output is byte-for-byte reproducible: zip entry timestamps and core
properties are pinned.
"""

import io
import zipfile
from datetime import datetime
from typing import Optional

from docx import Document
from docx.enum.section import WD_ORIENT
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_BREAK
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Mm, Pt, RGBColor, Twips

from config.constants import (
    COLUMN_GAP_TWIPS,
    PARAGRAPH_SPACE_AFTER_TWIPS,
    TOC_LEVELS,
)
from config.logging_config import get_logger

from ..document_model import RenderableDocument, Section
from ..page_layout import PageLayoutManager
from ..style_model import Alignment, StyleSpec
from ..templates.base_template import Template
from .base import BaseExporter, ExportArtifact, ExportFormat

logger = get_logger(__name__)

FIXED_ZIP_TIMESTAMP = (1980, 1, 1, 0, 0, 0)
FIXED_CORE_TIMESTAMP = datetime(2000, 1, 1, 0, 0, 0)
DOCUMENT_AUTHOR = "DocMorph"

ALIGNMENT_MAP = {
    Alignment.LEFT: WD_ALIGN_PARAGRAPH.LEFT,
    Alignment.CENTER: WD_ALIGN_PARAGRAPH.CENTER,
    Alignment.RIGHT: WD_ALIGN_PARAGRAPH.RIGHT,
    Alignment.JUSTIFY: WD_ALIGN_PARAGRAPH.JUSTIFY,
}


def normalize_docx_archive(raw: bytes) -> bytes:
    """Rewrite a DOCX zip with fixed entry timestamps, keeping entry order."""
    output = io.BytesIO()
    with zipfile.ZipFile(io.BytesIO(raw)) as source, \
            zipfile.ZipFile(output, "w", zipfile.ZIP_DEFLATED) as target:
        for info in source.infolist():
            entry = zipfile.ZipInfo(info.filename, date_time=FIXED_ZIP_TIMESTAMP)
            entry.compress_type = zipfile.ZIP_DEFLATED
            entry.external_attr = 0o644 << 16
            target.writestr(entry, source.read(info.filename))
    return output.getvalue()


class DocxStyleExporter(BaseExporter):
    """
    Export a document to DOCX format.

    Usage:
        exporter = DocxStyleExporter()
        artifact = exporter.export(document, template)
        artifact.filename   # "My_Doc_formatted.docx"
    """

    export_format = ExportFormat.DOCX
    filename_suffix = "_formatted"

    def __init__(
        self,
        column_gap_twips: int = COLUMN_GAP_TWIPS,
        space_after_twips: int = PARAGRAPH_SPACE_AFTER_TWIPS,
    ):
        self.column_gap_twips = column_gap_twips
        self.space_after_twips = space_after_twips

    def encode(self, document: RenderableDocument, template: Optional[Template] = None) -> bytes:
        if template is None:
            raise ValueError("DOCX export requires a template")

        doc = Document()

        self._setup_page_layout(doc, template)
        self._create_styles(doc, template)
        self._setup_header_footer(doc, document, template)

        if template.elements.show_toc:
            self._add_toc(doc)

        for section in document.sections:
            self._add_section(doc, section, template)

        self._set_metadata(doc, document)

        buffer = io.BytesIO()
        doc.save(buffer)
        content = normalize_docx_archive(buffer.getvalue())
        logger.debug(
            "Encoded DOCX: %d sections, template=%s, %d bytes",
            len(document), template.id, len(content),
        )
        return content

    # ------------------------------------------------------------------
    # Page setup
    # ------------------------------------------------------------------

    def _setup_page_layout(self, doc, template: Template) -> None:
        """Configure page size, orientation, margins and columns."""
        layout = PageLayoutManager(template.layout)
        section = doc.sections[0]

        section.orientation = (
            WD_ORIENT.LANDSCAPE if template.layout.is_landscape else WD_ORIENT.PORTRAIT
        )
        section.page_width = Mm(layout.page_size.width_mm)
        section.page_height = Mm(layout.page_size.height_mm)
        section.top_margin = Inches(layout.margins.top)
        section.bottom_margin = Inches(layout.margins.bottom)
        section.left_margin = Inches(layout.margins.left)
        section.right_margin = Inches(layout.margins.right)

        sect_pr = section._sectPr
        cols = sect_pr.find(qn("w:cols"))
        if cols is None:
            cols = OxmlElement("w:cols")
            sect_pr.append(cols)
        cols.set(qn("w:num"), str(layout.columns))
        cols.set(qn("w:space"), str(self.column_gap_twips))

    def _create_styles(self, doc, template: Template) -> None:
        """
        Modify Normal and Heading 1-3 styles.

        Runs carry the full formatting too; styles only give Word sensible
        defaults for text typed after export.
        """
        styles = doc.styles

        normal = styles["Normal"]
        self._apply_font(normal.font, template.styles.body)
        normal.paragraph_format.space_after = Twips(self.space_after_twips)

        for level, spec in ((1, template.styles.h1), (2, template.styles.h2), (3, template.styles.h3)):
            style_name = f"Heading {level}"
            if style_name in styles:
                self._apply_font(styles[style_name].font, spec)

    def _setup_header_footer(self, doc, document: RenderableDocument, template: Template) -> None:
        """Title in the header, page number field in the footer."""
        section = doc.sections[0]

        if document.title:
            header = section.header
            header_para = header.paragraphs[0] if header.paragraphs else header.add_paragraph()
            run = header_para.add_run(document.title)
            self._apply_run_formatting(run, template.styles.header)
            header_para.alignment = ALIGNMENT_MAP[template.styles.header.alignment]

        if template.elements.show_page_numbers:
            footer = section.footer
            footer_para = footer.paragraphs[0] if footer.paragraphs else footer.add_paragraph()
            footer_para.alignment = ALIGNMENT_MAP[template.styles.footer.alignment]
            self._add_page_number_field(footer_para, template.styles.footer)

    def _add_page_number_field(self, paragraph, style: StyleSpec) -> None:
        """Add auto-updating page number field to paragraph."""
        run = paragraph.add_run()
        fld_begin = OxmlElement("w:fldChar")
        fld_begin.set(qn("w:fldCharType"), "begin")
        run._r.append(fld_begin)

        run = paragraph.add_run()
        instr = OxmlElement("w:instrText")
        instr.set(qn("xml:space"), "preserve")
        instr.text = "PAGE"
        run._r.append(instr)

        run = paragraph.add_run()
        fld_sep = OxmlElement("w:fldChar")
        fld_sep.set(qn("w:fldCharType"), "separate")
        run._r.append(fld_sep)

        # Placeholder until Word updates fields
        run = paragraph.add_run("1")
        self._apply_run_formatting(run, style)

        run = paragraph.add_run()
        fld_end = OxmlElement("w:fldChar")
        fld_end.set(qn("w:fldCharType"), "end")
        run._r.append(fld_end)

    def _add_toc(self, doc) -> None:
        """
        Add a Table of Contents field followed by a page break.

        Note: Word populates the field on update (F9).
        """
        paragraph = doc.add_paragraph()
        run = paragraph.add_run()

        fld_begin = OxmlElement("w:fldChar")
        fld_begin.set(qn("w:fldCharType"), "begin")

        instr = OxmlElement("w:instrText")
        instr.set(qn("xml:space"), "preserve")
        instr.text = f'TOC \\o "1-{TOC_LEVELS}" \\h \\z \\u'

        fld_sep = OxmlElement("w:fldChar")
        fld_sep.set(qn("w:fldCharType"), "separate")

        fld_end = OxmlElement("w:fldChar")
        fld_end.set(qn("w:fldCharType"), "end")

        run._r.append(fld_begin)
        run._r.append(instr)
        run._r.append(fld_sep)
        run._r.append(fld_end)

        paragraph.add_run().add_break(WD_BREAK.PAGE)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def _add_section(self, doc, section: Section, template: Template) -> None:
        """One paragraph with one run per section."""
        level = section.type.heading_level
        style_name = f"Heading {level}" if level else "Normal"
        spec = template.style_for(section.type)

        para = doc.add_paragraph(style=style_name)
        run = para.add_run(spec.apply_case(section.content))

        self._apply_run_formatting(run, spec)
        self._apply_paragraph_formatting(para, spec)

    def _apply_font(self, font, spec: StyleSpec) -> None:
        font.name = spec.family
        font.size = Pt(spec.size_pt)
        font.bold = spec.bold
        font.italic = spec.italic
        font.color.rgb = RGBColor.from_string(spec.color_rgb)

    def _apply_run_formatting(self, run, spec: StyleSpec) -> None:
        """Apply character formatting to a run."""
        self._apply_font(run.font, spec)
        # East Asian text falls back to a theme font unless set explicitly
        run._element.get_or_add_rPr().get_or_add_rFonts().set(qn("w:eastAsia"), spec.family)

    def _apply_paragraph_formatting(self, para, spec: StyleSpec) -> None:
        """Apply paragraph formatting."""
        pf = para.paragraph_format
        pf.space_before = Pt(0)
        pf.space_after = Twips(self.space_after_twips)
        pf.line_spacing = spec.line_spacing or 1.0
        para.alignment = ALIGNMENT_MAP[spec.alignment]

    def _set_metadata(self, doc, document: RenderableDocument) -> None:
        """Set document metadata to fixed values."""
        core_props = doc.core_properties
        core_props.title = document.title
        core_props.author = DOCUMENT_AUTHOR
        core_props.last_modified_by = DOCUMENT_AUTHOR
        core_props.created = FIXED_CORE_TIMESTAMP
        core_props.modified = FIXED_CORE_TIMESTAMP
        core_props.revision = 1


def encode_docx(document: RenderableDocument, template: Template) -> ExportArtifact:
    return DocxStyleExporter().export(document, template)
