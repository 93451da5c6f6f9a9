#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Template - Named bundle of page layout, role styles and display flags.

A template carries one LayoutSpec, seven StyleSpecs keyed by role
(h1, h2, h3, body, caption, header, footer) and auxiliary element flags.
Templates are immutable: "editing" produces a new template.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional

from ..document_model import SectionType
from ..exceptions import TemplateValidationError
from ..style_model import LayoutSpec, StyleSpec, coerce_enum


class LogoPosition(str, Enum):
    """Where the logo placeholder is drawn."""
    HEADER_LEFT = "header-left"
    HEADER_RIGHT = "header-right"
    TOP_CENTER = "top-center"


STYLE_ROLES = ("h1", "h2", "h3", "body", "caption", "header", "footer")


@dataclass(frozen=True)
class TemplateStyles:
    """One StyleSpec per content role."""
    h1: StyleSpec
    h2: StyleSpec
    h3: StyleSpec
    body: StyleSpec
    caption: StyleSpec
    header: StyleSpec
    footer: StyleSpec

    def __post_init__(self):
        for role in STYLE_ROLES:
            if not isinstance(getattr(self, role), StyleSpec):
                raise TemplateValidationError("expected a StyleSpec", f"styles.{role}")

    def for_section(self, section_type: SectionType) -> StyleSpec:
        """Headings map to their own style; every other section uses body."""
        if section_type is SectionType.H1:
            return self.h1
        if section_type is SectionType.H2:
            return self.h2
        if section_type is SectionType.H3:
            return self.h3
        return self.body

    def to_dict(self) -> Dict[str, Any]:
        return {role: getattr(self, role).to_dict() for role in STYLE_ROLES}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TemplateStyles":
        if not isinstance(data, dict):
            raise TemplateValidationError(f"expected an object, got {data!r}", "styles")
        missing = [role for role in STYLE_ROLES if role not in data]
        if missing:
            raise TemplateValidationError(f"missing roles: {', '.join(missing)}", "styles")

        styles = {}
        for role in STYLE_ROLES:
            try:
                styles[role] = StyleSpec.from_dict(data[role])
            except TemplateValidationError as exc:
                raise TemplateValidationError(str(exc), f"styles.{role}") from exc
        return cls(**styles)


@dataclass(frozen=True)
class TemplateElements:
    """Auxiliary display flags."""
    show_page_numbers: bool = True
    show_toc: bool = False
    logo_position: Optional[LogoPosition] = None
    logo_url: Optional[str] = None

    def __post_init__(self):
        if self.logo_position is not None:
            object.__setattr__(
                self,
                "logo_position",
                coerce_enum(LogoPosition, self.logo_position, "elements.logo_position"),
            )

    def to_dict(self) -> Dict[str, Any]:
        data = {"showPageNumbers": self.show_page_numbers, "showToc": self.show_toc}
        if self.logo_position is not None:
            data["logoPosition"] = self.logo_position.value
        if self.logo_url:
            data["logoUrl"] = self.logo_url
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "TemplateElements":
        data = data or {}
        return cls(
            show_page_numbers=bool(data.get("showPageNumbers", data.get("show_page_numbers", True))),
            show_toc=bool(data.get("showToc", data.get("show_toc", False))),
            logo_position=data.get("logoPosition", data.get("logo_position")),
            logo_url=data.get("logoUrl", data.get("logo_url")),
        )


@dataclass(frozen=True)
class Template:
    """
    Complete template configuration.

    System templates are seeded at startup and never change; user
    templates are created and deleted but never edited in place.
    """
    id: str
    name: str
    description: str
    layout: LayoutSpec
    styles: TemplateStyles
    elements: TemplateElements = field(default_factory=TemplateElements)
    is_system: bool = False
    thumbnail_url: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id.strip():
            raise TemplateValidationError("template id must be a non-empty string", "id")
        if not isinstance(self.name, str) or not self.name.strip():
            raise TemplateValidationError("template name must be a non-empty string", "name")
        if not isinstance(self.layout, LayoutSpec):
            raise TemplateValidationError("expected a LayoutSpec", "layout")
        if not isinstance(self.styles, TemplateStyles):
            raise TemplateValidationError("expected TemplateStyles", "styles")
        if self.description is None:
            object.__setattr__(self, "description", "")

    def style_for(self, section_type: SectionType) -> StyleSpec:
        return self.styles.for_section(section_type)

    def derive(self, new_id: str, **changes) -> "Template":
        """Create a new (user) template based on this one."""
        changes.setdefault("is_system", False)
        return replace(self, id=new_id, **changes)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "isSystem": self.is_system,
            "layout": self.layout.to_dict(),
            "styles": self.styles.to_dict(),
            "elements": self.elements.to_dict(),
        }
        if self.thumbnail_url:
            data["thumbnailUrl"] = self.thumbnail_url
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Template":
        if not isinstance(data, dict):
            raise TemplateValidationError(f"expected an object, got {data!r}", "template")
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            description=data.get("description", ""),
            layout=LayoutSpec.from_dict(data.get("layout")),
            styles=TemplateStyles.from_dict(data.get("styles")),
            elements=TemplateElements.from_dict(data.get("elements")),
            is_system=bool(data.get("isSystem", data.get("is_system", False))),
            thumbnail_url=data.get("thumbnailUrl", data.get("thumbnail_url")),
        )

    def __repr__(self) -> str:
        return f"<Template(id='{self.id}', name='{self.name}', system={self.is_system})>"
