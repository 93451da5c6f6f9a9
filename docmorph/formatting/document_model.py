#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Model - Ordered, typed content sections of one document.

The section sequence is the reading order and is preserved by every
renderer and exporter. Documents and sections are frozen; edits return
new objects (copy-on-write).

Section metadata is a tagged variant per section type:
- image  -> ImageMetadata
- table  -> TableMetadata
- list   -> ListMetadata
Headings and paragraphs carry no metadata.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from config.constants import DEFAULT_TEMPLATE_ID

from .exceptions import DocumentValidationError


class SectionType(str, Enum):
    """Content block types."""
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    PARAGRAPH = "paragraph"
    IMAGE = "image"
    TABLE = "table"
    LIST = "list"

    @property
    def heading_level(self) -> Optional[int]:
        """1-3 for headings, None otherwise."""
        return HEADING_LEVELS.get(self)

    @property
    def is_heading(self) -> bool:
        return self in HEADING_LEVELS


HEADING_LEVELS = {
    SectionType.H1: 1,
    SectionType.H2: 2,
    SectionType.H3: 3,
}


# =============================================================================
# SECTION METADATA VARIANTS
# =============================================================================

_SCALARS = (str, int, float)


def _check_keys(data: Dict[str, Any], allowed: Iterable[str], kind: str) -> None:
    unknown = sorted(set(data) - set(allowed))
    if unknown:
        raise DocumentValidationError(
            f"unknown {kind} metadata keys: {', '.join(unknown)}", "metadata"
        )


def _text_tuple(value, name: str) -> Tuple[str, ...]:
    """``value`` as a tuple of strings; only lists/tuples of scalars are accepted."""
    if not isinstance(value, (list, tuple)):
        raise DocumentValidationError(
            f"{name} must be a list, got {type(value).__name__}", "metadata"
        )
    for item in value:
        if isinstance(item, bool) or not isinstance(item, _SCALARS):
            raise DocumentValidationError(
                f"{name} entries must be text or numbers, got {item!r}", "metadata"
            )
    return tuple(str(item) for item in value)


def _or_empty(value):
    return () if value is None else value


@dataclass(frozen=True)
class ImageMetadata:
    """Payload of an image section."""
    url: Optional[str] = None
    caption: str = ""
    alt_text: str = ""

    KEYS = ("url", "caption", "altText", "alt_text")

    def __post_init__(self):
        if self.url is not None and not isinstance(self.url, str):
            raise DocumentValidationError(f"url must be a string, got {self.url!r}", "metadata")
        for name in ("caption", "alt_text"):
            if not isinstance(getattr(self, name), str):
                raise DocumentValidationError(f"{name} must be a string", "metadata")

    def to_dict(self) -> Dict[str, Any]:
        return {"url": self.url, "caption": self.caption, "altText": self.alt_text}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImageMetadata":
        _check_keys(data, cls.KEYS, "image")
        return cls(
            url=data.get("url"),
            caption=data.get("caption") or "",
            alt_text=data.get("altText", data.get("alt_text")) or "",
        )


@dataclass(frozen=True)
class TableMetadata:
    """Payload of a table section (header row plus data rows)."""
    title: Optional[str] = None
    headers: Tuple[str, ...] = ()
    rows: Tuple[Tuple[str, ...], ...] = ()

    KEYS = ("title", "headers", "rows")

    def __post_init__(self):
        if self.title is not None and not isinstance(self.title, str):
            raise DocumentValidationError(f"title must be a string, got {self.title!r}", "metadata")
        object.__setattr__(self, "headers", _text_tuple(self.headers, "headers"))
        if not isinstance(self.rows, (list, tuple)):
            raise DocumentValidationError(
                f"rows must be a list, got {type(self.rows).__name__}", "metadata"
            )
        object.__setattr__(
            self,
            "rows",
            tuple(_text_tuple(row, f"rows[{i}]") for i, row in enumerate(self.rows)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "headers": list(self.headers),
            "rows": [list(row) for row in self.rows],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TableMetadata":
        _check_keys(data, cls.KEYS, "table")
        return cls(
            title=data.get("title"),
            headers=_or_empty(data.get("headers")),
            rows=_or_empty(data.get("rows")),
        )


@dataclass(frozen=True)
class ListMetadata:
    """Payload of a list section."""
    items: Tuple[str, ...] = ()
    ordered: bool = False

    KEYS = ("items", "ordered")

    def __post_init__(self):
        object.__setattr__(self, "items", _text_tuple(self.items, "items"))
        if not isinstance(self.ordered, bool):
            raise DocumentValidationError(
                f"ordered must be true or false, got {self.ordered!r}", "metadata"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {"items": list(self.items), "ordered": self.ordered}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ListMetadata":
        _check_keys(data, cls.KEYS, "list")
        ordered = data.get("ordered")
        return cls(
            items=_or_empty(data.get("items")),
            ordered=False if ordered is None else ordered,
        )


SectionMetadata = Union[ImageMetadata, TableMetadata, ListMetadata]

METADATA_TYPES = {
    SectionType.IMAGE: ImageMetadata,
    SectionType.TABLE: TableMetadata,
    SectionType.LIST: ListMetadata,
}


# =============================================================================
# SECTION
# =============================================================================

@dataclass(frozen=True)
class Section:
    """One typed block of document content."""
    id: str
    type: SectionType
    content: str = ""
    metadata: Optional[SectionMetadata] = None

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise DocumentValidationError("section id must be a non-empty string", "id")

        if not isinstance(self.type, SectionType):
            try:
                object.__setattr__(self, "type", SectionType(self.type))
            except ValueError:
                raise DocumentValidationError(
                    f"unknown section type {self.type!r}", "type"
                ) from None

        if self.content is None:
            object.__setattr__(self, "content", "")
        elif not isinstance(self.content, str):
            raise DocumentValidationError(
                f"content must be a string, got {type(self.content).__name__}", "content"
            )

        if self.metadata is not None:
            expected = METADATA_TYPES.get(self.type)
            if expected is None or not isinstance(self.metadata, expected):
                raise DocumentValidationError(
                    f"{type(self.metadata).__name__} does not match section type "
                    f"'{self.type.value}'",
                    "metadata",
                )

    def with_content(self, content: str) -> "Section":
        """Return a copy with new content."""
        return replace(self, content=content)

    def to_dict(self) -> Dict[str, Any]:
        data = {"id": self.id, "type": self.type.value, "content": self.content}
        if self.metadata is not None:
            data["metadata"] = self.metadata.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Section":
        section_type = data.get("type")
        metadata = data.get("metadata")

        parsed = None
        # null and {} both mean "no metadata"
        if metadata is not None and metadata != {}:
            if not isinstance(metadata, dict):
                raise DocumentValidationError(
                    f"expected an object, got {type(metadata).__name__}", "metadata"
                )
            try:
                kind = SectionType(section_type)
            except ValueError:
                kind = None  # reported by __post_init__
            if kind is not None:
                metadata_cls = METADATA_TYPES.get(kind)
                if metadata_cls is None:
                    raise DocumentValidationError(
                        f"section type '{kind.value}' carries no metadata", "metadata"
                    )
                parsed = metadata_cls.from_dict(metadata)

        return cls(
            id=str(data.get("id", "")),
            type=section_type,
            content=data.get("content", ""),
            metadata=parsed,
        )


# =============================================================================
# DOCUMENT
# =============================================================================

@dataclass(frozen=True)
class RenderableDocument:
    """
    The part of a stored document the formatting pipeline consumes.

    ``template_id`` is a weak reference: it is resolved through a
    TemplateRegistry and may point at a deleted template.
    """
    title: str
    sections: Tuple[Section, ...] = field(default_factory=tuple)
    template_id: str = DEFAULT_TEMPLATE_ID

    def __post_init__(self):
        if self.title is None:
            object.__setattr__(self, "title", "")
        sections = tuple(self.sections)
        seen = set()
        for section in sections:
            if not isinstance(section, Section):
                raise DocumentValidationError(
                    f"expected Section, got {type(section).__name__}", "sections"
                )
            if section.id in seen:
                raise DocumentValidationError(f"duplicate section id '{section.id}'", "sections")
            seen.add(section.id)
        object.__setattr__(self, "sections", sections)

    def __len__(self) -> int:
        return len(self.sections)

    @property
    def is_empty(self) -> bool:
        return not self.sections

    @property
    def word_count(self) -> int:
        """Whitespace-separated tokens over all sections."""
        return sum(len(section.content.split()) for section in self.sections)

    def headings(self) -> List[Section]:
        """Heading sections in reading order."""
        return [s for s in self.sections if s.type.is_heading]

    def with_sections(self, sections: Iterable[Section]) -> "RenderableDocument":
        return replace(self, sections=tuple(sections))

    def with_template(self, template_id: str) -> "RenderableDocument":
        return replace(self, template_id=template_id)

    def replace_section(self, section_id: str, content: str) -> "RenderableDocument":
        """Return a copy with one section's content replaced."""
        if all(s.id != section_id for s in self.sections):
            raise DocumentValidationError(f"no section with id '{section_id}'", "sections")
        return self.with_sections(
            s.with_content(content) if s.id == section_id else s for s in self.sections
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "templateId": self.template_id,
            "sections": [s.to_dict() for s in self.sections],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenderableDocument":
        return cls(
            title=data.get("title") or "",
            sections=tuple(Section.from_dict(s) for s in data.get("sections") or ()),
            template_id=data.get("templateId", data.get("template_id")) or DEFAULT_TEMPLATE_ID,
        )
