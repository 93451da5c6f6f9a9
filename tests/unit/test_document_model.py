"""
Unit tests for sections and RenderableDocument.
"""
import pytest

from config.constants import DEFAULT_TEMPLATE_ID
from docmorph.formatting import (
    DocumentValidationError,
    ImageMetadata,
    ListMetadata,
    RenderableDocument,
    Section,
    SectionType,
    TableMetadata,
)


class TestSectionType:

    def test_heading_levels(self):
        assert SectionType.H1.heading_level == 1
        assert SectionType.H3.heading_level == 3
        assert SectionType.PARAGRAPH.heading_level is None

    def test_is_heading(self):
        assert SectionType.H2.is_heading
        assert not SectionType.TABLE.is_heading


class TestSection:

    def test_type_string_coerced(self):
        section = Section(id="s1", type="h2", content="Scope")
        assert section.type is SectionType.H2

    def test_unknown_type_rejected(self):
        with pytest.raises(DocumentValidationError):
            Section(id="s1", type="quote", content="x")

    def test_empty_id_rejected(self):
        with pytest.raises(DocumentValidationError):
            Section(id="", type="paragraph")

    def test_none_content_becomes_empty(self):
        assert Section(id="s1", type="paragraph", content=None).content == ""

    def test_non_string_content_rejected(self):
        with pytest.raises(DocumentValidationError):
            Section(id="s1", type="paragraph", content=42)

    def test_metadata_must_match_type(self):
        with pytest.raises(DocumentValidationError):
            Section(id="s1", type="paragraph", metadata=ImageMetadata(url="a.png"))
        with pytest.raises(DocumentValidationError):
            Section(id="s2", type="table", metadata=ListMetadata(items=["a"]))

    def test_metadata_variants(self):
        image = Section(id="i", type="image", metadata=ImageMetadata(url="a.png", caption="Fig"))
        table = Section(
            id="t", type="table",
            metadata=TableMetadata(headers=["A", "B"], rows=[["1", "2"]]),
        )
        listing = Section(id="l", type="list", metadata=ListMetadata(items=["x", "y"], ordered=True))

        assert image.metadata.caption == "Fig"
        assert table.metadata.headers == ("A", "B")
        assert table.metadata.rows == (("1", "2"),)
        assert listing.metadata.items == ("x", "y")

    def test_with_content_returns_copy(self):
        section = Section(id="s1", type="paragraph", content="old")
        updated = section.with_content("new")
        assert updated.content == "new"
        assert section.content == "old"
        assert updated.id == "s1"

    def test_from_dict_image_metadata(self):
        section = Section.from_dict({
            "id": "img",
            "type": "image",
            "content": "",
            "metadata": {"url": "chart.png", "caption": "Chart", "altText": "A chart"},
        })
        assert isinstance(section.metadata, ImageMetadata)
        assert section.metadata.alt_text == "A chart"

    def test_from_dict_rejects_metadata_on_headings(self):
        with pytest.raises(DocumentValidationError) as exc_info:
            Section.from_dict({
                "id": "h", "type": "h1", "content": "Title", "metadata": {"url": "x.png"},
            })
        assert exc_info.value.field_name == "metadata"

    @pytest.mark.parametrize("metadata", [None, {}])
    def test_from_dict_empty_metadata_is_absent(self, metadata):
        section = Section.from_dict({"id": "h", "type": "h1", "metadata": metadata})
        assert section.metadata is None

    def test_from_dict_unknown_metadata_keys_rejected(self):
        with pytest.raises(DocumentValidationError) as exc_info:
            Section.from_dict({
                "id": "l", "type": "list", "metadata": {"items": ["a"], "style": "dots"},
            })
        assert "style" in str(exc_info.value)

    @pytest.mark.parametrize("section_type, metadata", [
        ("table", {"headers": 5}),
        ("table", {"headers": "AB"}),
        ("table", {"rows": [["1"], 2]}),
        ("table", {"rows": [[{"nested": 1}]]}),
        ("list", {"items": 3}),
        ("list", {"items": ["a", None]}),
        ("list", {"items": ["a"], "ordered": "yes"}),
        ("image", {"url": 7}),
        ("image", "chart.png"),
    ])
    def test_from_dict_malformed_metadata_rejected(self, section_type, metadata):
        with pytest.raises(DocumentValidationError) as exc_info:
            Section.from_dict({"id": "m", "type": section_type, "metadata": metadata})
        assert exc_info.value.field_name == "metadata"

    def test_table_cells_stringified(self):
        table = TableMetadata.from_dict({"headers": ["Year", 2024], "rows": [[1, 2.5]], "title": None})
        assert table.headers == ("Year", "2024")
        assert table.rows == (("1", "2.5"),)

    def test_null_metadata_fields_default_empty(self):
        listing = ListMetadata.from_dict({"items": None, "ordered": None})
        assert listing.items == ()
        assert listing.ordered is False

    def test_to_dict(self):
        section = Section(id="l", type="list", content="a", metadata=ListMetadata(items=["a"]))
        assert section.to_dict() == {
            "id": "l",
            "type": "list",
            "content": "a",
            "metadata": {"items": ["a"], "ordered": False},
        }


class TestRenderableDocument:

    def test_sections_stored_as_tuple(self, sample_sections):
        document = RenderableDocument(title="T", sections=list(sample_sections))
        assert isinstance(document.sections, tuple)
        assert len(document) == len(sample_sections)

    def test_default_template(self):
        assert RenderableDocument(title="T").template_id == DEFAULT_TEMPLATE_ID

    def test_duplicate_section_ids_rejected(self):
        with pytest.raises(DocumentValidationError):
            RenderableDocument(
                title="T",
                sections=(
                    Section(id="dup", type="paragraph"),
                    Section(id="dup", type="h1"),
                ),
            )

    def test_word_count(self):
        document = RenderableDocument(
            title="T",
            sections=(
                Section(id="a", type="h1", content="Hello world."),
                Section(id="b", type="paragraph", content="   "),
                Section(id="c", type="paragraph", content="one  two\nthree"),
                Section(id="d", type="paragraph", content=""),
            ),
        )
        assert document.word_count == 5

    def test_empty_document(self, empty_document):
        assert empty_document.is_empty
        assert empty_document.word_count == 0

    def test_headings(self, sample_document):
        assert [s.id for s in sample_document.headings()] == ["s1", "s3", "s5"]

    def test_replace_section_is_copy_on_write(self, sample_document):
        updated = sample_document.replace_section("s2", "Changed.")
        assert updated.sections[1].content == "Changed."
        assert sample_document.sections[1].content == "Hello world."
        assert [s.id for s in updated.sections] == [s.id for s in sample_document.sections]

    def test_replace_unknown_section_rejected(self, sample_document):
        with pytest.raises(DocumentValidationError):
            sample_document.replace_section("missing", "x")

    def test_with_template(self, sample_document):
        assert sample_document.with_template("tpl-legal").template_id == "tpl-legal"

    def test_from_dict(self):
        document = RenderableDocument.from_dict({
            "title": "Spec",
            "templateId": "tpl-tech",
            "sections": [
                {"id": "1", "type": "h1", "content": "Overview"},
                {"id": "2", "type": "paragraph", "content": "Text"},
            ],
        })
        assert document.template_id == "tpl-tech"
        assert [s.type for s in document.sections] == [SectionType.H1, SectionType.PARAGRAPH]

    def test_from_dict_missing_template_uses_default(self):
        document = RenderableDocument.from_dict({"title": "x", "sections": []})
        assert document.template_id == DEFAULT_TEMPLATE_ID
