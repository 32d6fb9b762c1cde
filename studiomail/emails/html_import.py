"""Convert legacy static HTML email bodies into builder blocks."""

import re
import uuid

from bs4 import BeautifulSoup, Comment, Doctype, NavigableString, Tag

from studiomail.emails.blocks import ContentBlock, parse_block

_HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
_WHITESPACE_RE = re.compile(r"\s+")
_GREETING_RE = re.compile(r"^Dear \{\{\s*first_?[nN]ame\s*\}\},?$")


def _new_id() -> str:
    return f"block-{uuid.uuid4().hex[:12]}"


def _clean_text(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text.replace("\xa0", " ")).strip()


def _link_for(url: str) -> tuple[str, str]:
    """Map a legacy href to a (linkType, linkValue) pair."""
    if url.startswith("mailto:"):
        return "CUSTOM", url
    if "/smart-file" in url or "{{smartFileUrl}}" in url or "{{smart_file_link}}" in url:
        return "SMART_FILE", ""
    if "/galleries/" in url or "{{galleryUrl}}" in url or "{{gallery_link}}" in url:
        return "GALLERY", ""
    if "/booking/" in url or "{{calendarUrl}}" in url or "{{calendar_link}}" in url:
        return "CALENDAR", ""
    return "CUSTOM", url


class _Collector:
    def __init__(self) -> None:
        self.blocks: list[ContentBlock] = []

    def add(self, block_type: str, content: dict) -> None:
        self.blocks.append(parse_block({"id": _new_id(), "type": block_type, "content": content}))

    def heading(self, text: str) -> None:
        text = _clean_text(text)
        if text:
            self.add("HEADING", {"text": text})

    def text(self, text: str) -> None:
        text = text.strip()
        if text and not _GREETING_RE.match(text):
            self.add("TEXT", {"text": text})

    def button(self, text: str, url: str) -> None:
        text = _clean_text(text)
        if not text or not url:
            return
        link_type, link_value = _link_for(url)
        self.add("BUTTON", {"text": text, "linkType": link_type, "linkValue": link_value, "variant": "default"})

    def walk(self, node: Tag) -> None:
        pending: list[str] = []

        def flush() -> None:
            if pending:
                self.text(_clean_text(" ".join(pending)))
                pending.clear()

        for child in node.children:
            if isinstance(child, (Comment, Doctype)):
                continue
            if isinstance(child, NavigableString):
                if child.strip():
                    pending.append(str(child))
                continue
            if not isinstance(child, Tag):
                continue
            name = child.name
            if name in ("script", "style", "head", "title", "meta"):
                continue
            if name in _HEADING_TAGS:
                flush()
                self.heading(child.get_text())
            elif name == "p":
                flush()
                self.text(_clean_text(child.get_text()))
            elif name in ("ul", "ol"):
                flush()
                items = [_clean_text(li.get_text()) for li in child.find_all("li")]
                self.text("\n".join(f"• {item}" for item in items if item))
            elif name == "a":
                flush()
                self.button(child.get_text(), child.get("href") or "")
            elif name == "img":
                flush()
                src = child.get("src") or ""
                if src:
                    content = {"url": src}
                    if child.get("alt"):
                        content["alt"] = child["alt"]
                    self.add("IMAGE", content)
            elif name == "br":
                flush()
                self.add("SPACER", {"height": 20})
            elif name in ("strong", "em", "b", "i", "u", "span"):
                pending.append(child.get_text())
            else:
                flush()
                self.walk(child)
        flush()


def convert_html_to_blocks(html: str) -> list[ContentBlock]:
    """Turn a static HTML email body into HEADING/TEXT/BUTTON/IMAGE/SPACER blocks.

    Headings, paragraphs, lists, standalone links and images map to one block
    each; containers are walked recursively. Links that point at smart files,
    galleries or booking pages become placeholder buttons with no link value.
    """
    if not html or not html.strip():
        return []
    soup = BeautifulSoup(html, "html.parser")
    root = soup.body or soup
    collector = _Collector()
    collector.walk(root)
    return collector.blocks
