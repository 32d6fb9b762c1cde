import os
from types import SimpleNamespace
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Use test DB
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGODB_DB_NAME", "studiomail_test")
os.environ.setdefault("SECRET_KEY", "test-secret-key-min-32-characters-long")
os.environ.setdefault("PUBLIC_BASE_URL", "https://app.example.test")


@pytest.fixture
def photographer() -> SimpleNamespace:
    """Stand-in for a Photographer document; routes only read attributes from it."""
    return SimpleNamespace(
        id="65f000000000000000000001",
        email="jane@studio.test",
        business_name="Doe Studio",
        photographer_name="Jane Doe",
        logo_url=None,
        headshot_url=None,
        brand_primary="#336699",
        brand_secondary=None,
        phone="(212) 555-0100",
        email_from_addr=None,
        website="https://doestudio.test",
        business_address=None,
        social_links={"instagram": "https://instagram.com/doestudio", "facebook": ""},
        email_header_style="minimal",
        email_signature_style="simple",
        session_version=0,
    )


@pytest_asyncio.fixture
async def client(photographer) -> AsyncGenerator[AsyncClient, None]:
    from studiomail.deps import get_current_photographer
    from studiomail.main import app

    app.dependency_overrides[get_current_photographer] = lambda: photographer
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def anonymous_client() -> AsyncGenerator[AsyncClient, None]:
    from studiomail.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
