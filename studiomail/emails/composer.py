"""In-memory editing state for the email template builder.

The composer owns an ordered block list and the header/signature selection.
Every mutation replaces the list wholesale and then notifies subscribers, so a
preview can re-render from a consistent snapshot. Nothing is persisted here;
the caller saves ``to_dict()`` when the operator asks for it.
"""

import uuid
from typing import Any, Callable

from studiomail.core.exceptions import BadRequestError, BlockNotFoundError
from studiomail.emails.blocks import (
    BLOCK_TYPES,
    SPACER_HEIGHTS,
    ButtonLinkType,
    ContentBlock,
    SpacerSize,
    default_content,
    dump_block,
    parse_block,
)
from studiomail.emails.branding import BrandingData
from studiomail.emails.document import EmailDocument, render_document
from studiomail.emails.variables import insert_token

Listener = Callable[["Composer"], None]


def new_block_id() -> str:
    return f"block-{uuid.uuid4().hex[:12]}"


class Composer:
    def __init__(self, document: EmailDocument | None = None) -> None:
        self._document = document.model_copy(deep=True) if document else EmailDocument()
        self._listeners: list[Listener] = []

    @classmethod
    def from_document(cls, document: EmailDocument) -> "Composer":
        return cls(document)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Composer":
        return cls(EmailDocument.model_validate(data))

    @property
    def blocks(self) -> list[ContentBlock]:
        return list(self._document.blocks)

    @property
    def document(self) -> EmailDocument:
        return self._document.model_copy(deep=True)

    def to_document(self) -> EmailDocument:
        return self.document

    def to_dict(self) -> dict[str, Any]:
        """Persisted form of the document (camelCase keys)."""
        return self._document.model_dump(mode="json", by_alias=True)

    # Subscriptions

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every mutation; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _replace(self, **changes: Any) -> None:
        self._document = self._document.model_copy(update=changes)
        self._notify()

    # Block operations

    def _index(self, block_id: str) -> int:
        for i, block in enumerate(self._document.blocks):
            if block.id == block_id:
                return i
        raise BlockNotFoundError(block_id)

    def get_block(self, block_id: str) -> ContentBlock:
        return self._document.blocks[self._index(block_id)]

    def add_block(self, block_type: str) -> ContentBlock:
        if block_type not in BLOCK_TYPES:
            raise BadRequestError(f"Unknown block type: {block_type}", details={"type": block_type})
        block = parse_block({"id": new_block_id(), "type": block_type, "content": default_content(block_type)})
        self._replace(blocks=[*self._document.blocks, block])
        return block

    def update_block(self, block_id: str, content: dict[str, Any]) -> ContentBlock:
        """Replace a block's content payload (camelCase keys, as the sub-editors send it)."""
        index = self._index(block_id)
        current = self._document.blocks[index]
        block = parse_block({"id": current.id, "type": current.type, "content": content})
        blocks = list(self._document.blocks)
        blocks[index] = block
        self._replace(blocks=blocks)
        return block

    def patch_block(self, block_id: str, **fields: Any) -> ContentBlock:
        content = dump_block(self.get_block(block_id)).get("content") or {}
        return self.update_block(block_id, {**content, **fields})

    def delete_block(self, block_id: str) -> None:
        """Remove by id; unknown ids are a no-op, like filtering the list."""
        blocks = [b for b in self._document.blocks if b.id != block_id]
        if len(blocks) != len(self._document.blocks):
            self._replace(blocks=blocks)

    def reorder(self, block_ids: list[str]) -> None:
        """Replace the order in one step, as a drag-and-drop drop does."""
        current = {b.id: b for b in self._document.blocks}
        if len(block_ids) != len(current) or set(block_ids) != set(current):
            raise BadRequestError("Reorder must list every block exactly once", details={"block_ids": block_ids})
        self._replace(blocks=[current[i] for i in block_ids])

    def move_block(self, block_id: str, index: int) -> None:
        blocks = list(self._document.blocks)
        block = blocks.pop(self._index(block_id))
        index = max(0, min(index, len(blocks)))
        blocks.insert(index, block)
        self._replace(blocks=blocks)

    def set_spacer_size(self, block_id: str, size: SpacerSize) -> ContentBlock:
        return self.patch_block(block_id, size=size, height=SPACER_HEIGHTS.get(size, SPACER_HEIGHTS["medium"]))

    def set_button_link_type(self, block_id: str, link_type: ButtonLinkType) -> ContentBlock:
        # Switching target kind invalidates whatever id/url was picked before.
        return self.patch_block(block_id, linkType=link_type, linkValue="")

    def insert_variable(
        self,
        block_id: str,
        field: str,
        token: str,
        start: int,
        end: int | None = None,
    ) -> int:
        """Splice ``token`` into a text field at the caret; returns the caret after it."""
        content = dump_block(self.get_block(block_id)).get("content") or {}
        text, caret = insert_token(content.get(field) or "", token, start, end)
        self.update_block(block_id, {**content, field: text})
        return caret

    # Document settings

    def set_subject(self, subject: str) -> None:
        self._replace(subject=subject)

    def set_branding(
        self,
        *,
        include_header: bool | None = None,
        header_style: str | None = None,
        include_signature: bool | None = None,
        signature_style: str | None = None,
    ) -> None:
        changes: dict[str, Any] = {}
        if include_header is not None:
            changes["include_header"] = include_header
        if header_style is not None:
            changes["header_style"] = header_style
        if include_signature is not None:
            changes["include_signature"] = include_signature
        if signature_style is not None:
            changes["signature_style"] = signature_style
        if changes:
            self._replace(**changes)

    def set_hero_image(self, url: str | None, include: bool = True) -> None:
        self._replace(hero_image_url=url, include_hero_image=include and bool(url))


class LivePreview:
    """Keeps a rendered preview in step with a composer and the branding cache."""

    def __init__(self, composer: Composer, branding: BrandingData | None = None) -> None:
        self._composer = composer
        self._branding = branding
        self.renders = 0
        self.html = ""
        self._unsubscribe = composer.subscribe(lambda _: self.refresh())
        self.refresh()

    def set_branding(self, branding: BrandingData | None) -> None:
        """Branding fetch resolved (or was invalidated): render again."""
        self._branding = branding
        self.refresh()

    def refresh(self) -> None:
        rendered = render_document(self._composer.document, self._branding, preview=True, include_wrapper=False)
        self.html = rendered.html_body
        self.renders += 1

    def close(self) -> None:
        self._unsubscribe()
