"""Content block model for the email template builder.

A template body is an ordered list of blocks; list position is display order.
Each block carries a ``type`` tag and a type-specific ``content`` payload.
Payload keys travel camelCase on the wire (``linkType``, ``linkValue``) and
unknown keys are kept so older or newer documents survive a load/save cycle.

Block types this version does not know about parse into ``UnknownBlock``
instead of failing validation; the renderer skips them.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter
from pydantic.alias_generators import to_camel

BlockType = Literal["HEADING", "TEXT", "BUTTON", "IMAGE", "SPACER", "HEADER", "SIGNATURE"]
BUTTON_VARIANTS: tuple[str, ...] = ("default", "secondary", "outline")
ButtonLinkType = Literal["CUSTOM", "SMART_FILE", "GALLERY", "CALENDAR"]
SpacerSize = Literal["small", "medium", "large"]

BLOCK_TYPES: tuple[str, ...] = ("HEADING", "TEXT", "BUTTON", "IMAGE", "SPACER", "HEADER", "SIGNATURE")

BLOCK_LABELS: dict[str, str] = {
    "HEADING": "Heading",
    "TEXT": "Text",
    "BUTTON": "Button",
    "IMAGE": "Image",
    "SPACER": "Spacer",
    "HEADER": "Email Header",
    "SIGNATURE": "Email Signature",
}

# The size label is cosmetic; height drives layout.
SPACER_HEIGHTS: dict[str, int] = {"small": 20, "medium": 40, "large": 60}
DEFAULT_SPACER_HEIGHT = 40

DEFAULT_BRANDING_STYLE = "professional"


class BlockContent(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class TextContent(BlockContent):
    text: str = ""


class ButtonContent(BlockContent):
    text: str = ""
    # Not restricted to BUTTON_VARIANTS; the renderer falls back to the default style.
    variant: str = "default"
    link_type: ButtonLinkType = "CUSTOM"
    # For non-CUSTOM links this is an opaque id resolved by the backend at send time.
    link_value: str = ""


class ImageContent(BlockContent):
    url: str = ""
    alt: str | None = None


class SpacerContent(BlockContent):
    size: SpacerSize | None = None
    height: int | None = None


class BrandingContent(BlockContent):
    style: str | None = None


class _Block(BaseModel):
    id: str


class HeadingBlock(_Block):
    type: Literal["HEADING"] = "HEADING"
    content: TextContent = Field(default_factory=TextContent)


class TextBlock(_Block):
    type: Literal["TEXT"] = "TEXT"
    content: TextContent = Field(default_factory=TextContent)


class ButtonBlock(_Block):
    type: Literal["BUTTON"] = "BUTTON"
    content: ButtonContent = Field(default_factory=ButtonContent)


class ImageBlock(_Block):
    type: Literal["IMAGE"] = "IMAGE"
    content: ImageContent = Field(default_factory=ImageContent)


class SpacerBlock(_Block):
    type: Literal["SPACER"] = "SPACER"
    content: SpacerContent = Field(default_factory=SpacerContent)


class HeaderBlock(_Block):
    type: Literal["HEADER"] = "HEADER"
    content: BrandingContent = Field(default_factory=BrandingContent)


class SignatureBlock(_Block):
    type: Literal["SIGNATURE"] = "SIGNATURE"
    content: BrandingContent = Field(default_factory=BrandingContent)


class UnknownBlock(_Block):
    type: str
    content: Any = None


def _block_tag(value: Any) -> str:
    if isinstance(value, dict):
        block_type = value.get("type")
    else:
        block_type = getattr(value, "type", None)
    return block_type if block_type in BLOCK_TYPES else "UNKNOWN"


ContentBlock = Annotated[
    Union[
        Annotated[HeadingBlock, Tag("HEADING")],
        Annotated[TextBlock, Tag("TEXT")],
        Annotated[ButtonBlock, Tag("BUTTON")],
        Annotated[ImageBlock, Tag("IMAGE")],
        Annotated[SpacerBlock, Tag("SPACER")],
        Annotated[HeaderBlock, Tag("HEADER")],
        Annotated[SignatureBlock, Tag("SIGNATURE")],
        Annotated[UnknownBlock, Tag("UNKNOWN")],
    ],
    Discriminator(_block_tag),
]

_BLOCK_ADAPTER: TypeAdapter[ContentBlock] = TypeAdapter(ContentBlock)
_BLOCK_LIST_ADAPTER: TypeAdapter[list[ContentBlock]] = TypeAdapter(list[ContentBlock])


def parse_block(data: Any) -> ContentBlock:
    return _BLOCK_ADAPTER.validate_python(data)


def parse_blocks(data: Any) -> list[ContentBlock]:
    """Build blocks from their persisted form (a list of ``{id, type, content}``)."""
    if not data:
        return []
    return _BLOCK_LIST_ADAPTER.validate_python(data)


def dump_block(block: ContentBlock) -> dict[str, Any]:
    return _BLOCK_ADAPTER.dump_python(block, mode="json", by_alias=True)


def dump_blocks(blocks: list[ContentBlock]) -> list[dict[str, Any]]:
    return _BLOCK_LIST_ADAPTER.dump_python(blocks, mode="json", by_alias=True)


def default_content(block_type: str) -> dict[str, Any]:
    """Payload a freshly added block starts with."""
    if block_type == "SPACER":
        return {"size": "medium", "height": SPACER_HEIGHTS["medium"]}
    if block_type == "BUTTON":
        return {"text": "", "linkType": "CUSTOM", "linkValue": "", "variant": "default"}
    if block_type in ("HEADER", "SIGNATURE"):
        return {"style": DEFAULT_BRANDING_STYLE}
    return {"text": ""}
