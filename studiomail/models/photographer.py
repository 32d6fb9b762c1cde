from datetime import datetime

from beanie import Document, Indexed
from pydantic import Field


class Photographer(Document):
    email: Indexed(str, unique=True)
    business_name: str = ""
    photographer_name: str | None = None
    logo_url: str | None = None
    headshot_url: str | None = None
    brand_primary: str | None = None
    brand_secondary: str | None = None
    phone: str | None = None
    email_from_addr: str | None = None  # contact address shown in signatures
    website: str | None = None
    business_address: str | None = None
    social_links: dict[str, str] = Field(default_factory=dict)
    email_header_style: str | None = None  # None = no default header
    email_signature_style: str | None = None
    session_version: int = 0
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "photographers"
