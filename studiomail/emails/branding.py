"""Email header and signature fragments built from a photographer's branding.

Both renderers are pure: the output depends only on the style, the branding
snapshot and the base URL used to absolutise relative image paths. Fields that
are missing fall back to a default or drop their element; nothing here raises
for absent data.
"""

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from studiomail.core.config import get_settings

HeaderStyle = Literal["none", "minimal", "professional", "bold", "classic"]
SignatureStyle = Literal["none", "simple", "professional", "detailed", "branded"]

HEADER_STYLES: list[dict[str, str]] = [
    {"value": "minimal", "label": "Minimal", "description": "Clean and simple centered header"},
    {"value": "professional", "label": "Professional", "description": "Centered with bottom border"},
    {"value": "bold", "label": "Bold", "description": "Eye-catching gradient background"},
    {"value": "classic", "label": "Classic", "description": "Traditional layout with text"},
]

SIGNATURE_STYLES: list[dict[str, str]] = [
    {"value": "simple", "label": "Simple", "description": "Clean text-based signature"},
    {"value": "professional", "label": "Professional", "description": "Includes headshot and social icons"},
    {"value": "detailed", "label": "Detailed", "description": "Full contact card with all details"},
    {"value": "branded", "label": "Branded", "description": "Brand-focused with color accents"},
]

DEFAULT_PRIMARY = "#000000"
DEFAULT_SECONDARY = "#666666"
DEFAULT_HEADSHOT_URL = (
    "https://images.unsplash.com/photo-1494790108377-be9c29b29330?w=400&h=400&fit=crop&crop=faces"
)

# Sample contact line shown in previews when the profile has no phone/email yet.
PREVIEW_PHONE = "(555) 123-4567"
PREVIEW_EMAIL = "hello@example.com"

SOCIAL_ICONS: dict[str, tuple[str, str]] = {
    "facebook": ("Facebook", "https://logo.clearbit.com/facebook.com"),
    "instagram": ("Instagram", "https://logo.clearbit.com/instagram.com"),
    "twitter": ("Twitter", "https://logo.clearbit.com/x.com"),
    "linkedin": ("LinkedIn", "https://logo.clearbit.com/linkedin.com"),
}


class _Snapshot(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class SocialLinks(_Snapshot):
    facebook: str | None = None
    instagram: str | None = None
    twitter: str | None = None
    linkedin: str | None = None

    def items(self) -> list[tuple[str, str]]:
        """Set links in icon order."""
        return [(name, url) for name in SOCIAL_ICONS if (url := getattr(self, name))]


class BrandingData(_Snapshot):
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
    social_links: SocialLinks | None = None


SAMPLE_BRANDING = BrandingData(
    business_name="Your Business Name",
    photographer_name="Your Name",
    phone="(555) 123-4567",
    email="hello@yourbusiness.com",
    website="www.yourbusiness.com",
)


def to_absolute_url(url_or_path: str | None, base_url: str | None = None) -> str | None:
    """Email clients need absolute image URLs; prefix relative paths with the app origin."""
    if not url_or_path:
        return None
    if url_or_path.startswith(("http://", "https://")):
        return url_or_path
    base = (base_url if base_url is not None else get_settings().public_base_url).rstrip("/")
    path = url_or_path if url_or_path.startswith("/") else f"/{url_or_path}"
    return f"{base}{path}"


def _display_website(website: str) -> str:
    return re.sub(r"^https?://", "", website)


def _display_name(data: BrandingData) -> str:
    return data.photographer_name or data.business_name or ""


def _social_icons(data: BrandingData, link_style: str, size: int) -> list[str]:
    links = data.social_links.items() if data.social_links else []
    return [
        f'<a href="{url}" style="{link_style} text-decoration: none;">'
        f'<img src="{SOCIAL_ICONS[name][1]}" alt="{SOCIAL_ICONS[name][0]}" width="{size}" height="{size}" '
        f'style="vertical-align: middle;" /></a>'
        for name, url in links
    ]


def _logo_or_name(data: BrandingData, logo_url: str | None, primary: str) -> str:
    if logo_url:
        return f'<img src="{logo_url}" alt="{data.business_name or "Logo"}" style="max-width: 150px; height: auto;" />'
    if data.business_name:
        return (
            f'<h2 style="margin: 0; color: {primary}; font-size: 24px; font-weight: 600;">'
            f"{data.business_name}</h2>"
        )
    return ""


def render_header(style: str | None, data: BrandingData, *, base_url: str | None = None) -> str:
    """Header fragment for ``style``; ``None``, ``"none"`` and unknown styles render nothing."""
    if not style or style == "none":
        return ""

    primary = data.brand_primary or DEFAULT_PRIMARY
    secondary = data.brand_secondary or DEFAULT_SECONDARY
    logo_url = to_absolute_url(data.logo_url, base_url)

    if style == "minimal":
        return (
            '<div style="text-align: center; padding: 20px 0; margin-bottom: 30px;">'
            f"{_logo_or_name(data, logo_url, primary)}"
            "</div>"
        )

    if style == "professional":
        return (
            f'<div style="text-align: center; padding: 20px 0; margin-bottom: 30px; border-bottom: 2px solid {primary};">'
            f"{_logo_or_name(data, logo_url, primary)}"
            "</div>"
        )

    if style == "bold":
        if logo_url:
            inner = (
                f'<img src="{logo_url}" alt="{data.business_name or "Logo"}" '
                'style="max-width: 150px; height: auto; filter: brightness(0) invert(1);" />'
            )
        elif data.business_name:
            inner = (
                '<h1 style="margin: 0; color: #ffffff !important; -webkit-text-fill-color: #ffffff !important; '
                'font-size: 28px; font-weight: 700; text-shadow: 0 2px 4px rgba(0,0,0,0.2);">'
                f"{data.business_name}</h1>"
            )
        else:
            inner = ""
        return (
            f'<div style="background: linear-gradient(135deg, {primary} 0%, {secondary} 100%); '
            f'padding: 30px 20px; text-align: center; margin-bottom: 30px;">{inner}</div>'
        )

    if style == "classic":
        names = ""
        if data.business_name:
            names += (
                f'<h2 style="margin: 0; color: {primary}; font-size: 22px; font-weight: 600;">'
                f"{data.business_name}</h2>"
            )
        if data.photographer_name:
            names += (
                f'<p style="margin: 5px 0 0 0; color: {secondary}; font-size: 14px;">'
                f"{data.photographer_name}</p>"
            )
        if logo_url:
            inner = (
                '<div style="display: table; width: 100%;">'
                '<div style="display: table-cell; vertical-align: middle; text-align: left;">'
                f'<img src="{logo_url}" alt="{data.business_name or "Logo"}" style="max-width: 120px; height: auto;" />'
                "</div>"
                f'<div style="display: table-cell; vertical-align: middle; text-align: right;">{names}</div>'
                "</div>"
            )
        else:
            inner = f'<div style="text-align: center;">{names}</div>'
        return f'<div style="padding: 20px 0; margin-bottom: 30px; border-bottom: 1px solid #e0e0e0;">{inner}</div>'

    return ""


def render_signature(
    style: str | None,
    data: BrandingData,
    *,
    base_url: str | None = None,
    preview: bool = True,
) -> str:
    """Signature fragment for ``style``.

    In preview mode a missing phone or email is shown as the sample contact
    line (``PREVIEW_PHONE`` / ``PREVIEW_EMAIL``); outbound renders pass
    ``preview=False`` and drop those lines instead.
    """
    if not style or style == "none":
        return ""

    primary = data.brand_primary or DEFAULT_PRIMARY
    secondary = data.brand_secondary or DEFAULT_SECONDARY
    logo_url = to_absolute_url(data.logo_url, base_url)
    headshot_url = to_absolute_url(data.headshot_url, base_url)
    phone = data.phone or (PREVIEW_PHONE if preview else None)
    email = data.email or (PREVIEW_EMAIL if preview else None)
    website = data.website
    name = _display_name(data)
    subtitle = data.business_name if data.business_name and data.photographer_name else None

    if style == "simple":
        lines = [f'<p style="margin: 5px 0;"><strong style="color: {primary};">{name}</strong></p>']
        if phone:
            lines.append(f'<p style="margin: 5px 0;">📞 {phone}</p>')
        if email:
            lines.append(f'<p style="margin: 5px 0;">✉️ {email}</p>')
        if website:
            lines.append(
                f'<p style="margin: 5px 0;">🌐 <a href="{website}" style="color: {primary}; text-decoration: none;">'
                f"{_display_website(website)}</a></p>"
            )
        return (
            f'<div style="margin-top: 30px; padding-top: 20px; border-top: 1px solid #e0e0e0; '
            f'color: {secondary}; font-size: 14px; line-height: 1.6;">{"".join(lines)}</div>'
        )

    if style == "professional":
        lines = [f'<p style="margin: 0 0 8px 0; font-size: 16px; font-weight: 600; color: {primary};">{name}</p>']
        if subtitle:
            lines.append(f'<p style="margin: 0 0 8px 0; font-size: 12px; color: {secondary};">{subtitle}</p>')
        if phone:
            lines.append(f'<p style="margin: 3px 0;">📞 {phone}</p>')
        if email:
            lines.append(
                f'<p style="margin: 3px 0;">✉️ <a href="mailto:{email}" style="color: {primary}; text-decoration: none;">'
                f"{email}</a></p>"
            )
        if website:
            lines.append(
                f'<p style="margin: 3px 0;">🌐 <a href="{website}" style="color: {primary}; text-decoration: none;">'
                f"{_display_website(website)}</a></p>"
            )
        icons = _social_icons(data, "margin-right: 10px;", 20)
        if icons:
            lines.append(f'<p style="margin: 10px 0 0 0;">{"".join(icons)}</p>')
        return (
            f'<div style="margin-top: 30px; padding: 20px; border-top: 2px solid {primary}; '
            f'color: {secondary}; font-size: 14px;">'
            '<table style="width: 100%; max-width: 500px;"><tr>'
            '<td style="width: 80px; vertical-align: top; padding-right: 15px;">'
            f'<img src="{headshot_url or DEFAULT_HEADSHOT_URL}" alt="{data.photographer_name or "Photographer"}" '
            f'style="width: 70px; height: 70px; border-radius: 50%; object-fit: cover; border: 2px solid {primary};" />'
            "</td>"
            f'<td style="vertical-align: top;">{"".join(lines)}</td>'
            "</tr></table></div>"
        )

    if style == "detailed":
        top = ""
        if logo_url:
            top += f'<img src="{logo_url}" alt="Logo" style="max-width: 100px; height: auto; margin-bottom: 10px;" />'
        top += (
            f'<h3 style="margin: 0; color: {primary}; font-size: 18px; font-weight: 600;">'
            f"{data.business_name or ''}</h3>"
        )
        if data.photographer_name:
            top += (
                f'<p style="margin: 5px 0 0 0; color: {secondary}; font-size: 14px;">'
                f"{data.photographer_name}</p>"
            )
        lines = []
        if phone:
            lines.append(f'<p style="margin: 5px 0;">📞 <strong>Phone:</strong> {phone}</p>')
        if email:
            lines.append(
                f'<p style="margin: 5px 0;">✉️ <strong>Email:</strong> <a href="mailto:{email}" '
                f'style="color: {primary}; text-decoration: none;">{email}</a></p>'
            )
        if website:
            lines.append(
                f'<p style="margin: 5px 0;">🌐 <strong>Web:</strong> <a href="{website}" '
                f'style="color: {primary}; text-decoration: none;">{_display_website(website)}</a></p>'
            )
        if data.business_address:
            lines.append(f'<p style="margin: 5px 0;">📍 <strong>Address:</strong> {data.business_address}</p>')
        icons = _social_icons(data, "margin-left: 8px;", 20)
        if icons:
            lines.append(f'<p style="margin: 10px 0 0 0;"><strong>Connect:</strong> {"".join(icons)}</p>')
        return (
            '<div style="margin-top: 30px; padding: 25px; background: linear-gradient(to bottom, #ffffff 0%, #f8f9fa 100%); '
            f'border: 1px solid #e0e0e0; border-radius: 8px; color: {secondary}; font-size: 14px;">'
            '<table style="width: 100%;">'
            f'<tr><td style="text-align: center; padding-bottom: 15px;">{top}</td></tr>'
            f'<tr><td style="border-top: 2px solid {primary}; padding-top: 15px;">{"".join(lines)}</td></tr>'
            "</table></div>"
        )

    if style == "branded":
        logo = (
            f'<img src="{logo_url}" alt="Logo" style="max-width: 80px; height: auto; filter: brightness(0) invert(1);" />'
            if logo_url
            else ""
        )
        lines = [f'<p style="margin: 0 0 10px 0; font-size: 16px; font-weight: 600; color: {primary};">{name}</p>']
        if subtitle:
            lines.append(f'<p style="margin: 0 0 10px 0; font-size: 13px; color: {secondary};">{subtitle}</p>')
        rows = []
        if phone:
            rows.append(f'<tr><td style="padding: 3px 0; width: 30px;">📞</td><td style="padding: 3px 0;">{phone}</td></tr>')
        if email:
            rows.append(
                '<tr><td style="padding: 3px 0;">✉️</td><td style="padding: 3px 0;">'
                f'<a href="mailto:{email}" style="color: {primary}; text-decoration: none;">{email}</a></td></tr>'
            )
        if website:
            rows.append(
                '<tr><td style="padding: 3px 0;">🌐</td><td style="padding: 3px 0;">'
                f'<a href="{website}" style="color: {primary}; text-decoration: none;">{_display_website(website)}</a>'
                "</td></tr>"
            )
        lines.append(f'<table style="width: 100%; font-size: 13px; color: {secondary};">{"".join(rows)}</table>')
        icons = _social_icons(data, "display: inline-block; margin-right: 12px;", 24)
        if icons:
            lines.append(
                f'<div style="margin-top: 15px; padding-top: 15px; border-top: 1px solid #e0e0e0;">{"".join(icons)}</div>'
            )
        return (
            '<div style="margin-top: 30px; padding: 0;">'
            f'<div style="background: {primary}; padding: 20px; text-align: center;">{logo}</div>'
            f'<div style="background: #f8f9fa; padding: 20px; border-left: 4px solid {primary};">{"".join(lines)}</div>'
            "</div>"
        )

    return ""
