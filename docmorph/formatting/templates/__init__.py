#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Templates Module.

Templates bundle a page layout, seven role styles and display flags.
System templates are seeded into every TemplateRegistry; user templates
are created and deleted through the registry.

Usage:
    from docmorph.formatting.templates import TemplateRegistry

    registry = TemplateRegistry()
    template = registry.resolve(document.template_id)
"""

from .base_template import (
    STYLE_ROLES,
    LogoPosition,
    Template,
    TemplateElements,
    TemplateStyles,
)
from .system_templates import SYSTEM_TEMPLATES
from .template_registry import TemplateRegistry

__all__ = [
    "STYLE_ROLES",
    "LogoPosition",
    "Template",
    "TemplateElements",
    "TemplateStyles",
    "SYSTEM_TEMPLATES",
    "TemplateRegistry",
]
