"""Block renderer: one content block in, one HTML (or plain-text) fragment out."""

from markupsafe import escape

from studiomail.core.logging import get_logger
from studiomail.emails.blocks import (
    DEFAULT_BRANDING_STYLE,
    DEFAULT_SPACER_HEIGHT,
    ButtonBlock,
    ContentBlock,
    HeaderBlock,
    HeadingBlock,
    ImageBlock,
    SignatureBlock,
    SpacerBlock,
    TextBlock,
)
from studiomail.emails.branding import BrandingData, render_header, render_signature, to_absolute_url
from studiomail.emails.variables import LINK_PLACEHOLDERS

log = get_logger(__name__)

BUTTON_STYLES: dict[str, str] = {
    "default": "background-color: #2563eb; color: #ffffff;",
    "secondary": "background-color: #6b7280; color: #ffffff;",
    "outline": "background-color: transparent; color: #2563eb; border: 2px solid #2563eb;",
}

_EMPTY_BRANDING = BrandingData()


def button_href(block: ButtonBlock) -> str:
    """Link target for a button: a placeholder token, or the custom URL verbatim."""
    content = block.content
    if content.link_type in LINK_PLACEHOLDERS:
        return LINK_PLACEHOLDERS[content.link_type]
    return content.link_value or "#"


def spacer_height(block: SpacerBlock) -> int:
    height = block.content.height
    return DEFAULT_SPACER_HEIGHT if height is None else height


def render_block(
    block: ContentBlock,
    branding: BrandingData | None = None,
    *,
    preview: bool = True,
    base_url: str | None = None,
) -> str:
    """HTML fragment for ``block``; unknown block types render as an empty string."""
    if isinstance(block, HeadingBlock):
        text = block.content.text or "Heading"
        return (
            '<h2 style="font-size: 24px; font-weight: bold; color: #1a1a1a; margin: 0 0 16px 0;">'
            f"{escape(text)}</h2>"
        )

    if isinstance(block, TextBlock):
        lines = (block.content.text or "Text content").split("\n")
        body = "<br>".join(str(escape(line)) for line in lines)
        return (
            '<p style="font-size: 16px; line-height: 1.6; color: #4a4a4a; margin: 0 0 16px 0; '
            f'white-space: pre-wrap;">{body}</p>'
        )

    if isinstance(block, ButtonBlock):
        style = BUTTON_STYLES.get(block.content.variant, BUTTON_STYLES["default"])
        return (
            '<div style="margin: 0 0 16px 0;">'
            f'<a href="{button_href(block)}" style="display: inline-block; padding: 12px 24px; {style} '
            'border-radius: 6px; font-weight: 600; text-decoration: none; text-align: center;">'
            f"{escape(block.content.text or 'Button Text')}</a>"
            "</div>"
        )

    if isinstance(block, ImageBlock):
        if not block.content.url:
            return (
                '<div style="margin: 0 0 16px 0; padding: 32px; background-color: #f3f4f6; '
                'border-radius: 8px; text-align: center; color: #9ca3af;">No image URL provided</div>'
            )
        alt = block.content.alt or "Email content"
        src = to_absolute_url(block.content.url, base_url)
        return (
            '<div style="margin: 0 0 16px 0;">'
            f'<img src="{escape(src)}" alt="{escape(alt)}" '
            'style="max-width: 100%; height: auto; border-radius: 8px; display: block;">'
            "</div>"
        )

    if isinstance(block, SpacerBlock):
        return f'<div style="height: {spacer_height(block)}px;"></div>'

    if isinstance(block, HeaderBlock):
        return render_header(block.content.style or DEFAULT_BRANDING_STYLE, branding or _EMPTY_BRANDING, base_url=base_url)

    if isinstance(block, SignatureBlock):
        return render_signature(
            block.content.style or DEFAULT_BRANDING_STYLE,
            branding or _EMPTY_BRANDING,
            base_url=base_url,
            preview=preview,
        )

    log.debug("block_skipped", block_id=getattr(block, "id", None), block_type=getattr(block, "type", None))
    return ""


def render_blocks(
    blocks: list[ContentBlock],
    branding: BrandingData | None = None,
    *,
    preview: bool = True,
    base_url: str | None = None,
) -> str:
    """Fragments for ``blocks`` in list order, newline separated."""
    return "\n".join(render_block(b, branding, preview=preview, base_url=base_url) for b in blocks)


def render_block_text(block: ContentBlock, branding: BrandingData | None = None) -> str:
    """Plain-text counterpart of ``render_block`` for the text/plain body."""
    if isinstance(block, HeadingBlock):
        text = block.content.text or "Heading"
        return f"\n{text}\n{'=' * len(text)}\n"
    if isinstance(block, TextBlock):
        return f"{block.content.text or 'Text content'}\n"
    if isinstance(block, ButtonBlock):
        return f"\n[{block.content.text or 'Button'}] {button_href(block)}\n"
    if isinstance(block, ImageBlock):
        return f"\n[Image: {block.content.url}]\n" if block.content.url else "\n[No image]\n"
    if isinstance(block, SpacerBlock):
        return "\n"
    if isinstance(block, SignatureBlock):
        return signature_text(branding or _EMPTY_BRANDING)
    return ""


def render_blocks_text(blocks: list[ContentBlock], branding: BrandingData | None = None) -> str:
    return "\n".join(render_block_text(b, branding) for b in blocks)


def signature_text(branding: BrandingData) -> str:
    lines = ["", "---", branding.photographer_name or branding.business_name or ""]
    if branding.phone:
        lines.append(f"Phone: {branding.phone}")
    if branding.email:
        lines.append(f"Email: {branding.email}")
    if branding.website:
        lines.append(f"Web: {branding.website}")
    return "\n".join(lines) + "\n"
