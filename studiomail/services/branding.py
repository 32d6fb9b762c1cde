"""Photographer branding: snapshot for the renderers and the settings update."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from studiomail.core.audit import log_event
from studiomail.core.logging import get_logger
from studiomail.emails.branding import BrandingData, SocialLinks
from studiomail.models.photographer import Photographer

log = get_logger(__name__)


class BrandingUpdate(BaseModel):
    """Fields the branding settings form submits; omitted fields are left as is."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    business_name: str | None = None
    photographer_name: str | None = None
    logo_url: str | None = None
    headshot_url: str | None = None
    brand_primary: str | None = None
    brand_secondary: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    business_address: str | None = None
    social_links: dict[str, str | None] | None = None
    header_style: str | None = None
    signature_style: str | None = None


def branding_for_photographer(photographer: Photographer) -> BrandingData:
    """Branding snapshot for the header/signature renderers."""
    social = {k: v for k, v in (photographer.social_links or {}).items() if v}
    return BrandingData(
        business_name=photographer.business_name or None,
        photographer_name=photographer.photographer_name,
        logo_url=photographer.logo_url,
        headshot_url=photographer.headshot_url,
        brand_primary=photographer.brand_primary,
        brand_secondary=photographer.brand_secondary,
        phone=photographer.phone,
        email=photographer.email_from_addr or photographer.email,
        website=photographer.website,
        business_address=photographer.business_address,
        social_links=SocialLinks.model_validate(social) if social else None,
    )


def branding_settings(photographer: Photographer) -> dict[str, Any]:
    data = branding_for_photographer(photographer).model_dump(mode="json", by_alias=True)
    data["headerStyle"] = photographer.email_header_style
    data["signatureStyle"] = photographer.email_signature_style
    return data


def _style_or_none(style: str) -> str | None:
    return None if style in ("", "none") else style


async def update_branding_settings(photographer: Photographer, update: BrandingUpdate) -> Photographer:
    """Apply the settings form. ``"none"`` styles clear the default; empty social links are dropped."""
    fields = update.model_dump(exclude_unset=True)
    changed: list[str] = []
    if "business_name" in fields:
        photographer.business_name = fields["business_name"] or ""
        changed.append("business_name")
    for name in (
        "photographer_name",
        "logo_url",
        "headshot_url",
        "brand_primary",
        "brand_secondary",
        "phone",
        "website",
        "business_address",
    ):
        if name in fields:
            setattr(photographer, name, fields[name] or None)
            changed.append(name)
    if "email" in fields:
        photographer.email_from_addr = fields["email"] or None
        changed.append("email")
    if "social_links" in fields:
        photographer.social_links = {k: v.strip() for k, v in (fields["social_links"] or {}).items() if v and v.strip()}
        changed.append("social_links")
    if "header_style" in fields:
        photographer.email_header_style = _style_or_none(fields["header_style"] or "")
        changed.append("header_style")
    if "signature_style" in fields:
        photographer.email_signature_style = _style_or_none(fields["signature_style"] or "")
        changed.append("signature_style")

    photographer.updated_at = datetime.utcnow()
    await photographer.save()
    await log_event(str(photographer.id), "branding_updated", "photographer", str(photographer.id), {"fields": changed})
    log.info("branding_updated", photographer_id=str(photographer.id), fields=changed)
    return photographer
