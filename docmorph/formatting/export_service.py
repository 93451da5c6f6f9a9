#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Export Service - Dispatch a document to the encoder for a format.

Encoders either return a complete artifact or fail with a single
ExportError; nothing is retried and no partial artifact is produced.
"""

import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from config.logging_config import get_logger

from .document_model import RenderableDocument
from .exceptions import ExportError
from .exporters import (
    BaseExporter,
    DocxStyleExporter,
    ExportArtifact,
    ExportFormat,
    MarkdownStyleExporter,
    PlainTextExporter,
)
from .templates.base_template import Template

logger = get_logger(__name__)


def default_exporters() -> Dict[ExportFormat, BaseExporter]:
    return {
        ExportFormat.TXT: PlainTextExporter(),
        ExportFormat.MD: MarkdownStyleExporter(),
        ExportFormat.DOCX: DocxStyleExporter(),
    }


def export_document(
    document: RenderableDocument,
    template: Template,
    export_format: Union[ExportFormat, str],
    exporters: Optional[Dict[ExportFormat, BaseExporter]] = None,
) -> ExportArtifact:
    """
    Encode ``document`` in ``export_format``.

    Raises:
        ValueError: unknown format
        ExportError: the encoder failed
    """
    export_format = ExportFormat(export_format)
    exporter = (exporters or default_exporters())[export_format]

    try:
        artifact = exporter.export(document, template)
    except Exception as exc:
        logger.exception(
            "Export to %s failed for '%s' (template=%s)",
            export_format.value, document.title, template.id if template else None,
        )
        raise ExportError(export_format.value) from exc

    logger.info("Exported %s (%d bytes)", artifact.filename, artifact.size)
    return artifact


def _default_file_mode() -> int:
    """Mode a plain open() would create: 0o666 minus the process umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_artifact(artifact: ExportArtifact, directory: Union[str, Path]) -> Path:
    """
    Write an artifact into ``directory`` and return its path.

    The file is written to a temporary name and renamed into place, so a
    failure never leaves a partial file behind.
    """
    directory = Path(directory)
    target = directory / artifact.filename

    tmp_name = None
    try:
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=str(directory), prefix=".export-", suffix=".part")
        with os.fdopen(fd, "wb") as handle:
            handle.write(artifact.content)
        # mkstemp creates 0600
        os.chmod(tmp_name, _default_file_mode())
        os.replace(tmp_name, target)
    except OSError as exc:
        logger.exception("Failed to write %s", target)
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise ExportError(artifact.export_format.value) from exc

    logger.info("Saved %s", target)
    return target
