#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Formatting Errors - Shallow error taxonomy for the formatting core.

- ValidationError: rejected template / document input (never persisted)
- TemplateNotFoundError / SystemTemplateError: explicit registry misuse
- ExportError: an encoder failed; no partial artifact is produced
"""


class DocMorphError(Exception):
    """Base class for all formatting core errors."""


class ValidationError(DocMorphError, ValueError):
    """Input failed validation at construction time."""

    def __init__(self, message: str, field_name: str = None):
        self.field_name = field_name
        if field_name:
            message = f"{field_name}: {message}"
        super().__init__(message)


class TemplateValidationError(ValidationError):
    """Malformed StyleSpec, LayoutSpec or Template."""


class DocumentValidationError(ValidationError):
    """Malformed Section or document."""


class TemplateNotFoundError(DocMorphError, KeyError):
    """Template id is not registered."""

    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(template_id)

    def __str__(self) -> str:
        return f"Unknown template: '{self.template_id}'"


class SystemTemplateError(DocMorphError):
    """System templates are read-only."""

    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(f"System template '{template_id}' cannot be modified or deleted")


class TemplateStorageError(DocMorphError):
    """Custom templates could not be persisted."""


class ExportError(DocMorphError):
    """Export failed while encoding or writing the artifact."""

    def __init__(self, export_format: str, message: str = "Export failed"):
        self.export_format = export_format
        super().__init__(message)
