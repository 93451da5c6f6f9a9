"""
Unit tests for the plain text and Markdown encoders and file naming.
"""
import pytest

from docmorph.formatting import (
    ExportFormat,
    MarkdownStyleExporter,
    PlainTextExporter,
    RenderableDocument,
    Section,
    encode_markdown,
    encode_plain_text,
    sanitize_filename,
)
from docmorph.formatting.exporters import to_markdown, to_plain_text


class TestSanitizeFilename:

    @pytest.mark.parametrize("title, expected", [
        ("Quarterly Report", "Quarterly_Report"),
        ("Quarterly   Report\tQ3", "Quarterly_Report_Q3"),
        ("a/b\\c:d*e?f\"g<h>i|j", "abcdefghij"),
        ("Báo cáo tài chính", "Báo_cáo_tài_chính"),
        ("", "document"),
        (None, "document"),
        ("???", "document"),
        ("...", "document"),
    ])
    def test_sanitize(self, title, expected):
        assert sanitize_filename(title) == expected


class TestPlainText:

    def test_round_trip_scenario(self, title_document):
        artifact = encode_plain_text(title_document)
        assert artifact.content == b"Title\n\nHello world."
        assert artifact.filename == "Title_Doc.txt"
        assert artifact.export_format is ExportFormat.TXT
        assert artifact.media_type.startswith("text/plain")

    def test_segment_count(self, sample_document):
        text = to_plain_text(sample_document.sections)
        assert len(text.split("\n\n")) == len(sample_document.sections)

    def test_empty_section_still_has_segment(self):
        document = RenderableDocument(
            title="t",
            sections=(
                Section(id="1", type="paragraph", content="a"),
                Section(id="2", type="paragraph", content=""),
                Section(id="3", type="paragraph", content="b"),
            ),
        )
        assert to_plain_text(document.sections) == "a\n\n\n\nb"

    def test_empty_document(self, empty_document):
        assert PlainTextExporter().encode(empty_document) == b""

    def test_utf8(self):
        document = RenderableDocument(
            title="Ghi chú", sections=(Section(id="1", type="paragraph", content="Xin chào"),)
        )
        assert encode_plain_text(document).content.decode("utf-8") == "Xin chào"

    def test_template_ignored(self, title_document, ieee_template, legal_template):
        assert (
            encode_plain_text(title_document, ieee_template).content
            == encode_plain_text(title_document, legal_template).content
        )


class TestMarkdown:

    def test_round_trip_scenario(self, title_document):
        artifact = encode_markdown(title_document)
        assert artifact.content == b"# Title\n\nHello world."
        assert artifact.filename == "Title_Doc.md"
        assert artifact.media_type.startswith("text/markdown")

    def test_heading_prefixes(self, sample_document):
        segments = to_markdown(sample_document.sections).split("\n\n")
        assert segments == [
            "# Introduction",
            "Hello world.",
            "## Background",
            "Some more text here.",
            "### Details",
            "first, second",
            "Results table",
            "Figure 1",
        ]

    def test_segment_count(self, sample_document):
        markdown = MarkdownStyleExporter().encode(sample_document).decode("utf-8")
        assert len(markdown.split("\n\n")) == len(sample_document.sections)

    def test_deterministic(self, sample_document):
        assert encode_markdown(sample_document) == encode_markdown(sample_document)
