"""Email template CRUD, render-on-save and the send-time render."""

from datetime import datetime
from typing import Any, Mapping

from beanie import PydanticObjectId

from studiomail.core.audit import log_event
from studiomail.core.config import get_settings
from studiomail.core.logging import get_logger
from studiomail.emails.blocks import dump_blocks
from studiomail.emails.branding import BrandingData
from studiomail.emails.document import EmailDocument, RenderedEmail, render_document
from studiomail.emails.sanitize import sanitize_preview_html
from studiomail.models.email_template import EmailTemplate
from studiomail.models.photographer import Photographer

log = get_logger(__name__)

_DOCUMENT_FIELDS = (
    "subject",
    "include_header",
    "header_style",
    "include_signature",
    "signature_style",
    "include_hero_image",
    "hero_image_url",
)


def document_from_template(t: EmailTemplate) -> EmailDocument:
    data: dict[str, Any] = {name: getattr(t, name) for name in _DOCUMENT_FIELDS}
    data["blocks"] = t.blocks
    return EmailDocument.model_validate(data)


def _apply_document(t: EmailTemplate, document: EmailDocument, branding: BrandingData) -> None:
    for name in _DOCUMENT_FIELDS:
        setattr(t, name, getattr(document, name))
    t.blocks = dump_blocks(document.blocks)
    # Cached bodies keep {{tokens}}; the sender substitutes per recipient.
    rendered = render_document(document, branding, preview=False)
    t.html_body = rendered.html_body
    t.text_body = rendered.text_body


async def create_template(
    photographer: Photographer,
    name: str,
    document: EmailDocument,
    branding: BrandingData,
) -> EmailTemplate:
    t = EmailTemplate(photographer=photographer, name=name)
    _apply_document(t, document, branding)
    await t.insert()
    await log_event(str(photographer.id), "template_created", "email_template", str(t.id))
    log.info("template_created", template_id=str(t.id), blocks=len(t.blocks))
    return t


async def get_template(template_id: PydanticObjectId, photographer_id: PydanticObjectId) -> EmailTemplate | None:
    return await EmailTemplate.find_one(
        EmailTemplate.id == template_id,
        EmailTemplate.photographer.id == photographer_id,
    )


async def list_templates(
    photographer_id: PydanticObjectId,
    limit: int,
    offset: int,
) -> tuple[list[EmailTemplate], int]:
    query = EmailTemplate.find(EmailTemplate.photographer.id == photographer_id)
    total = await query.count()
    items = await query.sort(-EmailTemplate.updated_at).skip(offset).limit(limit).to_list()
    return items, total


async def update_template(
    template_id: PydanticObjectId,
    photographer_id: PydanticObjectId,
    branding: BrandingData,
    name: str | None = None,
    changes: dict[str, Any] | None = None,
) -> EmailTemplate | None:
    """Rename and/or replace document fields; fields not in ``changes`` keep their stored value."""
    t = await get_template(template_id, photographer_id)
    if not t:
        return None
    if name is not None:
        t.name = name
    document = document_from_template(t)
    if changes:
        document = document.model_copy(update=changes)
    _apply_document(t, document, branding)
    t.updated_at = datetime.utcnow()
    await t.save()
    await log_event(str(photographer_id), "template_updated", "email_template", str(t.id))
    return t


async def delete_template(template_id: PydanticObjectId, photographer_id: PydanticObjectId) -> bool:
    t = await get_template(template_id, photographer_id)
    if not t:
        return False
    await t.delete()
    await log_event(str(photographer_id), "template_deleted", "email_template", str(template_id))
    return True


def preview_document(document: EmailDocument, branding: BrandingData | None) -> RenderedEmail:
    """Composer preview: sample contact fallbacks, no shell, sanitized when enabled."""
    rendered = render_document(document, branding, preview=True, include_wrapper=False)
    if get_settings().preview_sanitize:
        rendered = rendered.model_copy(update={"html_body": sanitize_preview_html(rendered.html_body)})
    return rendered


def render_for_send(
    document: EmailDocument,
    branding: BrandingData,
    variables: Mapping[str, Any] | None = None,
) -> RenderedEmail:
    """Authoritative render for an outbound email."""
    return render_document(document, branding, variables=variables, preview=False)
