from typing import Any

from beanie import PydanticObjectId
from bson.errors import InvalidId
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from studiomail.core.exceptions import NotFoundError
from studiomail.core.pagination import Page, paginate
from studiomail.deps import get_current_branding, get_current_photographer
from studiomail.emails.blocks import BLOCK_LABELS, BLOCK_TYPES, BUTTON_VARIANTS, default_content, dump_blocks
from studiomail.emails.branding import BrandingData
from studiomail.emails.document import EmailDocument
from studiomail.emails.html_import import convert_html_to_blocks
from studiomail.emails.variables import LINK_PLACEHOLDERS, VARIABLES
from studiomail.models.email_template import EmailTemplate
from studiomail.models.photographer import Photographer
from studiomail.services import templates as templates_service

router = APIRouter()


class TemplateCreate(EmailDocument):
    name: str = Field(min_length=1)


class TemplateUpdate(EmailDocument):
    name: str | None = None


class ImportHtmlRequest(BaseModel):
    html: str


class RenderRequest(BaseModel):
    variables: dict[str, Any] = Field(default_factory=dict)


def _document(body: EmailDocument) -> EmailDocument:
    return EmailDocument(**{name: getattr(body, name) for name in EmailDocument.model_fields})


def _template_id(template_id: str) -> PydanticObjectId:
    try:
        return PydanticObjectId(template_id)
    except (InvalidId, TypeError):
        raise NotFoundError("Template not found", details={"template_id": template_id})


def _template_out(t: EmailTemplate) -> dict[str, Any]:
    return {
        "id": str(t.id),
        "name": t.name,
        "document": templates_service.document_from_template(t).model_dump(mode="json", by_alias=True),
        "html_body": t.html_body,
        "text_body": t.text_body,
        "created_at": t.created_at.isoformat(),
        "updated_at": t.updated_at.isoformat(),
    }


@router.get("/variables")
async def template_variables():
    """Variable catalogue for the composer's insert menu."""
    return {
        "variables": [{"token": token, "label": label} for token, label in VARIABLES],
        "link_placeholders": LINK_PLACEHOLDERS,
    }


@router.get("/block-types")
async def template_block_types():
    """Block palette for the composer: type, label and the content a new block starts with."""
    return {
        "block_types": [
            {"type": t, "label": BLOCK_LABELS[t], "default_content": default_content(t)} for t in BLOCK_TYPES
        ],
        "button_variants": list(BUTTON_VARIANTS),
    }


@router.post("/preview")
async def template_preview(
    body: EmailDocument,
    branding: BrandingData = Depends(get_current_branding),
):
    """Render an unsaved document the way the composer preview shows it."""
    return templates_service.preview_document(body, branding).model_dump()


@router.post("/import-html")
async def template_import_html(
    body: ImportHtmlRequest,
    photographer: Photographer = Depends(get_current_photographer),
):
    """Convert a legacy static HTML body into blocks."""
    return {"blocks": dump_blocks(convert_html_to_blocks(body.html))}


@router.get("")
async def templates_list(
    limit: int | None = Query(None),
    offset: int | None = Query(None),
    photographer: Photographer = Depends(get_current_photographer),
) -> Page[dict[str, Any]]:
    limit, offset = paginate(limit, offset)
    items, total = await templates_service.list_templates(photographer.id, limit, offset)
    return Page(
        items=[
            {"id": str(t.id), "name": t.name, "subject": t.subject, "updated_at": t.updated_at.isoformat()}
            for t in items
        ],
        limit=limit,
        offset=offset,
        total=total,
    )


@router.post("")
async def template_create(
    body: TemplateCreate,
    photographer: Photographer = Depends(get_current_photographer),
    branding: BrandingData = Depends(get_current_branding),
):
    t = await templates_service.create_template(photographer, body.name, _document(body), branding)
    return _template_out(t)


@router.get("/{template_id}")
async def template_get(template_id: str, photographer: Photographer = Depends(get_current_photographer)):
    t = await templates_service.get_template(_template_id(template_id), photographer.id)
    if not t:
        raise NotFoundError("Template not found", details={"template_id": template_id})
    return _template_out(t)


@router.put("/{template_id}")
async def template_update(
    template_id: str,
    body: TemplateUpdate,
    photographer: Photographer = Depends(get_current_photographer),
    branding: BrandingData = Depends(get_current_branding),
):
    """Save the composer's document. Only fields present in the body are replaced."""
    changes = {name: getattr(body, name) for name in body.model_fields_set if name in EmailDocument.model_fields}
    t = await templates_service.update_template(
        _template_id(template_id),
        photographer.id,
        branding,
        name=body.name,
        changes=changes,
    )
    if not t:
        raise NotFoundError("Template not found", details={"template_id": template_id})
    return _template_out(t)


@router.delete("/{template_id}")
async def template_delete(template_id: str, photographer: Photographer = Depends(get_current_photographer)):
    ok = await templates_service.delete_template(_template_id(template_id), photographer.id)
    if not ok:
        raise NotFoundError("Template not found", details={"template_id": template_id})
    return {"status": "deleted"}


@router.post("/{template_id}/render")
async def template_render(
    template_id: str,
    body: RenderRequest,
    photographer: Photographer = Depends(get_current_photographer),
    branding: BrandingData = Depends(get_current_branding),
):
    """Render a saved template for sending, substituting recipient variables."""
    t = await templates_service.get_template(_template_id(template_id), photographer.id)
    if not t:
        raise NotFoundError("Template not found", details={"template_id": template_id})
    document = templates_service.document_from_template(t)
    return templates_service.render_for_send(document, branding, body.variables).model_dump()
