"""
Formatting API Routes
DocMorph - templates, live preview and export

Endpoints:
    GET    /api/formatting/templates              - List templates
    GET    /api/formatting/templates/{id}         - Get one template
    POST   /api/formatting/templates              - Create a user template
    DELETE /api/formatting/templates/{id}         - Delete a user template
    POST   /api/formatting/preview                - Render preview tree + HTML
    POST   /api/formatting/export/{format}        - Download txt / md / docx
"""

from typing import Any, Dict, List, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from pydantic import BaseModel, Field

from config.logging_config import get_logger
from config.settings import settings
from docmorph.formatting import (
    DocumentValidationError,
    ExportError,
    ExportFormat,
    FormattingPipeline,
    PreviewRenderer,
    RenderableDocument,
    SystemTemplateError,
    TemplateNotFoundError,
    TemplateRegistry,
    TemplateStorageError,
    TemplateValidationError,
    content_blocks,
    render_html,
)

from .limiter import limiter

logger = get_logger(__name__)


# =========================================
# Pydantic Models
# =========================================

class SectionPayload(BaseModel):
    """One document section"""
    id: str
    type: str = Field(..., description="h1, h2, h3, paragraph, image, table or list")
    content: str = ""
    metadata: Optional[Dict[str, Any]] = None


class DocumentPayload(BaseModel):
    """Document to preview or export"""
    title: str = ""
    template_id: Optional[str] = Field(None, alias="templateId")
    sections: List[SectionPayload] = Field(default_factory=list)

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "title": "Quarterly Report",
                "templateId": "tpl-corp",
                "sections": [
                    {"id": "s1", "type": "h1", "content": "Summary"},
                    {"id": "s2", "type": "paragraph", "content": "Revenue grew."},
                ],
            }
        }


class PreviewRequest(BaseModel):
    """Request to render a live preview"""
    document: DocumentPayload
    zoom: Optional[float] = Field(None, description="Zoom factor, clamped to the supported range")


class PreviewResponse(BaseModel):
    """Rendered preview"""
    template_id: str
    zoom: float
    block_count: int
    word_count: int
    html: str
    tree: Dict[str, Any]


class TemplateCreateRequest(BaseModel):
    """Request to create a user template"""
    name: str
    description: str = ""
    layout: Dict[str, Any]
    styles: Dict[str, Any]
    elements: Optional[Dict[str, Any]] = None
    thumbnail_url: Optional[str] = Field(None, alias="thumbnailUrl")

    class Config:
        populate_by_name = True


# =========================================
# Global Registry
# =========================================

_template_registry: Optional[TemplateRegistry] = None


def get_template_registry() -> TemplateRegistry:
    """Get or create the global template registry"""
    global _template_registry

    if _template_registry is None:
        _template_registry = TemplateRegistry(
            storage_path=settings.custom_templates_file,
            default_template_id=settings.default_template_id,
        )

    return _template_registry


def get_preview_renderer() -> PreviewRenderer:
    """
    Fresh renderer per request.

    A preview without ``zoom`` renders at the configured default zoom; zoom
    set by one request never carries over to another client.
    """
    return PreviewRenderer(
        default_zoom=settings.default_zoom,
        min_zoom=settings.min_zoom,
        max_zoom=settings.max_zoom,
    )


def reset_template_registry():
    """Reset the global registry (useful for testing)"""
    global _template_registry
    _template_registry = None


def get_pipeline(
    registry: TemplateRegistry = Depends(get_template_registry),
    renderer: PreviewRenderer = Depends(get_preview_renderer),
) -> FormattingPipeline:
    pipeline = FormattingPipeline.from_settings(settings, registry=registry)
    pipeline.renderer = renderer
    return pipeline


def _to_document(payload: DocumentPayload) -> RenderableDocument:
    try:
        return RenderableDocument.from_dict(payload.model_dump(by_alias=True))
    except DocumentValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))


def _content_disposition(filename: str) -> str:
    ascii_name = filename.encode("ascii", "ignore").decode("ascii") or "download"
    return f'attachment; filename="{ascii_name}"; filename*=UTF-8\'\'{quote(filename)}'


# =========================================
# Router
# =========================================

router = APIRouter(prefix="/api/formatting", tags=["Formatting"])


@router.get("/templates")
async def list_templates(registry: TemplateRegistry = Depends(get_template_registry)):
    """
    List all templates.

    System templates come first, then user templates in creation order.
    """
    templates = registry.list()
    return {
        "templates": [t.to_dict() for t in templates],
        "default": registry.default.id,
        "total": len(templates),
    }


@router.get("/templates/{template_id}")
async def get_template(
    template_id: str,
    registry: TemplateRegistry = Depends(get_template_registry),
):
    """Get a single template"""
    try:
        return registry.require(template_id).to_dict()
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/templates", status_code=201)
async def create_template(
    request: TemplateCreateRequest,
    registry: TemplateRegistry = Depends(get_template_registry),
):
    """Create a user template; the id is generated"""
    try:
        template = registry.add_from_dict(request.model_dump(by_alias=True))
    except TemplateValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except TemplateStorageError as e:
        raise HTTPException(status_code=500, detail=f"Could not save template: {e}")
    return template.to_dict()


@router.delete("/templates/{template_id}")
async def delete_template(
    template_id: str,
    registry: TemplateRegistry = Depends(get_template_registry),
):
    """Delete a user template; system templates are read-only"""
    try:
        registry.delete(template_id)
    except SystemTemplateError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except TemplateStorageError as e:
        raise HTTPException(status_code=500, detail=f"Could not save templates: {e}")
    return {"success": True, "deleted": template_id}


@router.post("/preview", response_model=PreviewResponse)
@limiter.limit(settings.rate_limit)
async def preview_document(
    request: Request,
    body: PreviewRequest,
    pipeline: FormattingPipeline = Depends(get_pipeline),
):
    """
    Render the live preview.

    Unknown template ids fall back to the default template. Without
    ``zoom`` the configured default zoom is used.
    """
    document = _to_document(body.document)
    template = pipeline.resolve_template(document)
    page = pipeline.renderer.render(document, template, body.zoom)

    return PreviewResponse(
        template_id=template.id,
        zoom=pipeline.renderer.zoom,
        block_count=len(content_blocks(page)),
        word_count=document.word_count,
        html=render_html(page),
        tree=page.to_dict(),
    )


@router.post("/export/{export_format}")
@limiter.limit(settings.export_rate_limit)
async def export_document(
    request: Request,
    export_format: ExportFormat,
    body: DocumentPayload,
    pipeline: FormattingPipeline = Depends(get_pipeline),
):
    """Encode the document and return it as a download"""
    document = _to_document(body)

    try:
        artifact = pipeline.export(document, export_format)
    except ExportError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return Response(
        content=artifact.content,
        media_type=artifact.media_type,
        headers={"Content-Disposition": _content_disposition(artifact.filename)},
    )
