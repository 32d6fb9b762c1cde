"""Whole-email rendering: hero image, header, blocks and signature in one body.

The same function backs the composer's live preview and the authoritative
render the send pipeline performs; only ``preview`` and ``variables`` differ.
"""

from typing import Any, Mapping

from markupsafe import escape
from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from studiomail.emails.blocks import DEFAULT_BRANDING_STYLE, ContentBlock, dump_blocks
from studiomail.emails.branding import (
    SAMPLE_BRANDING,
    BrandingData,
    render_header,
    render_signature,
    to_absolute_url,
)
from studiomail.emails.render import render_blocks, render_blocks_text, signature_text
from studiomail.emails.variables import render_variables

EMAIL_SHELL = """<!DOCTYPE html>
<html>
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="margin: 0; padding: 0; font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;">
  <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
{body}
  </div>
</body>
</html>"""


class EmailDocument(BaseModel):
    """An email template as the composer edits it and the backend stores it."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    subject: str = ""
    blocks: list[ContentBlock] = Field(default_factory=list)
    include_header: bool = False
    header_style: str | None = DEFAULT_BRANDING_STYLE
    include_signature: bool = False
    signature_style: str | None = DEFAULT_BRANDING_STYLE
    include_hero_image: bool = False
    hero_image_url: str | None = None

    @field_serializer("blocks")
    def _dump_blocks(self, blocks: list[ContentBlock]) -> list[dict[str, Any]]:
        return dump_blocks(blocks)


class RenderedEmail(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    subject: str
    html_body: str
    text_body: str


def _hero_image(url: str, base_url: str | None) -> str:
    return (
        '<div style="margin: 0 0 20px 0;">'
        f'<img src="{escape(to_absolute_url(url, base_url))}" alt="Hero" style="width: 100%; height: auto; display: block;">'
        "</div>"
    )


def render_document(
    document: EmailDocument,
    branding: BrandingData | None = None,
    *,
    variables: Mapping[str, Any] | None = None,
    preview: bool = True,
    include_wrapper: bool = True,
    base_url: str | None = None,
) -> RenderedEmail:
    """Render ``document`` to subject, HTML body and plain-text body.

    Args:
        document: Blocks plus header/signature/hero selections.
        branding: Photographer branding snapshot. When missing, previews use
            ``SAMPLE_BRANDING`` and outbound renders use an empty snapshot.
        variables: Values for ``{{token}}`` substitution. Tokens without a
            value, including the link placeholders, are left in place.
        preview: Preview renders show sample contact details for missing
            phone/email in signatures.
        include_wrapper: Wrap the HTML fragments in the full email document.
        base_url: Origin for relative logo/headshot paths.

    Returns:
        RenderedEmail with subject, html_body and text_body.
    """
    if branding is None:
        branding = SAMPLE_BRANDING if preview else BrandingData()

    html_parts: list[str] = []
    text_parts: list[str] = []

    if document.include_hero_image and document.hero_image_url:
        html_parts.append(_hero_image(document.hero_image_url, base_url))
    if document.include_header:
        header = render_header(document.header_style, branding, base_url=base_url)
        if header:
            html_parts.append(header)

    html_parts.append(render_blocks(document.blocks, branding, preview=preview, base_url=base_url))
    text_parts.append(render_blocks_text(document.blocks, branding))

    if document.include_signature:
        signature = render_signature(document.signature_style, branding, base_url=base_url, preview=preview)
        if signature:
            html_parts.append(signature)
            text_parts.append(signature_text(branding))

    html_body = "\n".join(html_parts)
    if include_wrapper:
        html_body = EMAIL_SHELL.format(body=html_body)
    text_body = "\n".join(text_parts).strip()
    subject = document.subject

    if variables:
        html_body = render_variables(html_body, variables, escape_html=True)
        text_body = render_variables(text_body, variables)
        subject = render_variables(subject, variables)

    return RenderedEmail(subject=subject, html_body=html_body, text_body=text_body)
