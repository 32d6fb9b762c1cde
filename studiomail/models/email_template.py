from datetime import datetime
from typing import Any

from beanie import Document, Link
from pydantic import Field

from studiomail.models.photographer import Photographer


class EmailTemplate(Document):
    photographer: Link[Photographer]
    name: str
    subject: str = ""
    blocks: list[dict[str, Any]] = Field(default_factory=list)  # camelCase block dicts
    include_header: bool = False
    header_style: str | None = None
    include_signature: bool = False
    signature_style: str | None = None
    include_hero_image: bool = False
    hero_image_url: str | None = None
    # Rendered on save for senders that don't run the block renderer
    html_body: str = ""
    text_body: str = ""
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "email_templates"
        indexes = [
            [("photographer.$id", 1), ("updated_at", -1)],
        ]
