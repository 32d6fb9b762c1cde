from fastapi import APIRouter, Depends, Query

from studiomail.core.config import get_settings
from studiomail.deps import get_current_photographer
from studiomail.emails.branding import HEADER_STYLES, SIGNATURE_STYLES, render_header, render_signature
from studiomail.emails.sanitize import sanitize_preview_html
from studiomail.models.photographer import Photographer
from studiomail.services import branding as branding_service

router = APIRouter()


def _preview(html: str) -> str:
    return sanitize_preview_html(html) if get_settings().preview_sanitize else html


@router.get("")
async def branding_get(photographer: Photographer = Depends(get_current_photographer)):
    return branding_service.branding_settings(photographer)


@router.put("")
async def branding_update(
    body: branding_service.BrandingUpdate,
    photographer: Photographer = Depends(get_current_photographer),
):
    photographer = await branding_service.update_branding_settings(photographer, body)
    return branding_service.branding_settings(photographer)


@router.get("/styles")
async def branding_styles():
    return {"header_styles": HEADER_STYLES, "signature_styles": SIGNATURE_STYLES}


@router.get("/header")
async def branding_header_preview(
    style: str | None = Query(None),
    photographer: Photographer = Depends(get_current_photographer),
):
    """Header fragment in ``style`` (defaults to the saved header style)."""
    style = style or photographer.email_header_style
    branding = branding_service.branding_for_photographer(photographer)
    return {"style": style, "html": _preview(render_header(style, branding))}


@router.get("/signature")
async def branding_signature_preview(
    style: str | None = Query(None),
    photographer: Photographer = Depends(get_current_photographer),
):
    style = style or photographer.email_signature_style
    branding = branding_service.branding_for_photographer(photographer)
    return {"style": style, "html": _preview(render_signature(style, branding, preview=True))}
