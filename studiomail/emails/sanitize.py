"""Sanitization policy for the preview surface.

Renderer output is not safe to inject anywhere; each consumer applies its own
policy. The preview pane uses this allow-list, outbound email does not.
"""

from functools import lru_cache

import bleach
from bleach.css_sanitizer import CSSSanitizer

PREVIEW_TAGS = [
    "p", "br", "strong", "em", "b", "i", "u",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li", "a", "img",
    "table", "thead", "tbody", "tr", "td", "th",
    "div", "span", "hr",
]

PREVIEW_ATTRIBUTES = {
    "*": ["style", "title"],
    "a": ["href", "title", "target", "rel"],
    "img": ["src", "alt", "width", "height"],
    "td": ["colspan", "rowspan", "width", "align", "valign"],
}

PREVIEW_CSS_PROPERTIES = [
    "color", "background-color", "background",
    "font-family", "font-size", "font-weight", "font-style",
    "text-align", "text-decoration", "text-transform", "text-shadow",
    "margin", "margin-top", "margin-bottom", "margin-left", "margin-right",
    "padding", "padding-top", "padding-bottom", "padding-left", "padding-right",
    "border", "border-top", "border-bottom", "border-left", "border-right",
    "border-color", "border-style", "border-width", "border-radius",
    "width", "height", "max-width", "min-width",
    "display", "float", "clear", "white-space",
    "line-height", "vertical-align", "object-fit", "filter",
]


@lru_cache
def _cleaner() -> bleach.Cleaner:
    return bleach.Cleaner(
        tags=PREVIEW_TAGS,
        attributes=PREVIEW_ATTRIBUTES,
        css_sanitizer=CSSSanitizer(allowed_css_properties=PREVIEW_CSS_PROPERTIES),
        strip=True,
        strip_comments=True,
    )


def sanitize_preview_html(html: str) -> str:
    """Strip scripts, event handlers and unknown tags/styles from a preview fragment."""
    if not html:
        return ""
    return _cleaner().clean(html)
