#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Style Model - Typed font/paragraph styles and page geometry.

StyleSpec and LayoutSpec are immutable values validated on construction.
Both convert to and from the camelCase JSON shape stored by the web client
(``size``/``color``/``spacing`` and ``marginTop``...), accepting the
explicit spellings (``sizePt``/``colorHex``/``lineSpacing``) as well.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .exceptions import TemplateValidationError


HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


# =============================================================================
# ENUMS
# =============================================================================

class Alignment(str, Enum):
    """Paragraph alignment."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class PageSize(str, Enum):
    """Supported paper sizes."""
    A4 = "A4"
    LETTER = "Letter"
    LEGAL = "Legal"


class Orientation(str, Enum):
    """Page orientation."""
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


def coerce_enum(enum_cls, value, field_name: str):
    """Return ``value`` as a member of ``enum_cls`` or raise TemplateValidationError."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise TemplateValidationError(
            f"invalid value {value!r} (expected one of: {allowed})", field_name
        ) from None


def _require_number(value, field_name: str) -> float:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TemplateValidationError(f"expected a number, got {value!r}", field_name)
    if not math.isfinite(value):
        raise TemplateValidationError(f"expected a finite number, got {value!r}", field_name)
    return float(value)


def _pick(data: Dict[str, Any], *keys, default=None):
    """Return the first key present in ``data``."""
    for key in keys:
        if key in data:
            return data[key]
    return default


# =============================================================================
# STYLE SPEC
# =============================================================================

@dataclass(frozen=True)
class StyleSpec:
    """
    Font and paragraph formatting for one content role.

    Invariants:
        size_pt > 0
        color_hex matches #RRGGBB
        line_spacing, when given, > 0
    """
    family: str
    size_pt: float
    bold: bool = False
    italic: bool = False
    color_hex: str = "#000000"
    alignment: Alignment = Alignment.LEFT
    line_spacing: Optional[float] = None
    uppercase: bool = False

    def __post_init__(self):
        if not isinstance(self.family, str) or not self.family.strip():
            raise TemplateValidationError("font family must be a non-empty string", "family")

        size = _require_number(self.size_pt, "size_pt")
        if size <= 0:
            raise TemplateValidationError(f"must be > 0, got {self.size_pt!r}", "size_pt")
        object.__setattr__(self, "size_pt", size)

        if not isinstance(self.color_hex, str) or not HEX_COLOR_RE.match(self.color_hex):
            raise TemplateValidationError(
                f"expected #RRGGBB, got {self.color_hex!r}", "color_hex"
            )

        object.__setattr__(self, "alignment", coerce_enum(Alignment, self.alignment, "alignment"))

        if self.line_spacing is not None:
            spacing = _require_number(self.line_spacing, "line_spacing")
            if spacing <= 0:
                raise TemplateValidationError(
                    f"must be > 0, got {self.line_spacing!r}", "line_spacing"
                )
            object.__setattr__(self, "line_spacing", spacing)

        object.__setattr__(self, "bold", bool(self.bold))
        object.__setattr__(self, "italic", bool(self.italic))
        object.__setattr__(self, "uppercase", bool(self.uppercase))

    @property
    def color_rgb(self) -> str:
        """Color as ``RRGGBB`` without the leading hash."""
        return self.color_hex[1:].upper()

    def apply_case(self, text: str) -> str:
        """Apply the case transform to literal text."""
        return text.upper() if self.uppercase else text

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "family": self.family,
            "size": self.size_pt,
            "bold": self.bold,
            "italic": self.italic,
            "color": self.color_hex,
            "alignment": self.alignment.value,
        }
        if self.line_spacing is not None:
            data["spacing"] = self.line_spacing
        if self.uppercase:
            data["uppercase"] = True
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StyleSpec":
        if not isinstance(data, dict):
            raise TemplateValidationError(f"expected an object, got {data!r}", "style")
        return cls(
            family=_pick(data, "family", "fontFamily"),
            size_pt=_pick(data, "size", "sizePt", "size_pt"),
            bold=_pick(data, "bold", default=False),
            italic=_pick(data, "italic", default=False),
            color_hex=_pick(data, "color", "colorHex", "color_hex", default="#000000"),
            alignment=_pick(data, "alignment", default=Alignment.LEFT),
            line_spacing=_pick(data, "spacing", "lineSpacing", "line_spacing"),
            uppercase=_pick(data, "uppercase", default=False) or False,
        )


# =============================================================================
# LAYOUT SPEC
# =============================================================================

@dataclass(frozen=True)
class LayoutSpec:
    """Page geometry: paper size, orientation, margins (inches) and columns."""
    page_size: PageSize = PageSize.A4
    orientation: Orientation = Orientation.PORTRAIT
    margin_top_in: float = 1.0
    margin_bottom_in: float = 1.0
    margin_left_in: float = 1.0
    margin_right_in: float = 1.0
    columns: int = 1

    def __post_init__(self):
        object.__setattr__(self, "page_size", coerce_enum(PageSize, self.page_size, "page_size"))
        object.__setattr__(
            self, "orientation", coerce_enum(Orientation, self.orientation, "orientation")
        )

        for name in ("margin_top_in", "margin_bottom_in", "margin_left_in", "margin_right_in"):
            value = _require_number(getattr(self, name), name)
            if value < 0:
                raise TemplateValidationError(f"must be >= 0, got {value!r}", name)
            object.__setattr__(self, name, value)

        if isinstance(self.columns, bool) or self.columns not in (1, 2):
            raise TemplateValidationError(f"must be 1 or 2, got {self.columns!r}", "columns")
        object.__setattr__(self, "columns", int(self.columns))

    @property
    def is_landscape(self) -> bool:
        return self.orientation is Orientation.LANDSCAPE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pageSize": self.page_size.value,
            "orientation": self.orientation.value,
            "marginTop": self.margin_top_in,
            "marginBottom": self.margin_bottom_in,
            "marginLeft": self.margin_left_in,
            "marginRight": self.margin_right_in,
            "columns": self.columns,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutSpec":
        if not isinstance(data, dict):
            raise TemplateValidationError(f"expected an object, got {data!r}", "layout")
        return cls(
            page_size=_pick(data, "pageSize", "page_size", default=PageSize.A4),
            orientation=_pick(data, "orientation", default=Orientation.PORTRAIT),
            margin_top_in=_pick(data, "marginTop", "marginTopIn", "margin_top_in", default=1.0),
            margin_bottom_in=_pick(
                data, "marginBottom", "marginBottomIn", "margin_bottom_in", default=1.0
            ),
            margin_left_in=_pick(data, "marginLeft", "marginLeftIn", "margin_left_in", default=1.0),
            margin_right_in=_pick(
                data, "marginRight", "marginRightIn", "margin_right_in", default=1.0
            ),
            columns=_pick(data, "columns", default=1),
        )
