import pytest

from studiomail.services.branding import branding_for_photographer, branding_settings


def test_branding_snapshot_drops_empty_social_links(photographer):
    branding = branding_for_photographer(photographer)
    assert branding.social_links.instagram == "https://instagram.com/doestudio"
    assert branding.social_links.facebook is None
    assert branding.email == "jane@studio.test"


def test_branding_settings_payload(photographer):
    data = branding_settings(photographer)
    assert data["businessName"] == "Doe Studio"
    assert data["headerStyle"] == "minimal"
    assert data["signatureStyle"] == "simple"


@pytest.mark.asyncio
async def test_header_preview_defaults_to_saved_style(client):
    r = await client.get("/v1/branding/header")
    assert r.status_code == 200
    data = r.json()
    assert data["style"] == "minimal"
    assert "Doe Studio" in data["html"]


@pytest.mark.asyncio
async def test_signature_preview_in_requested_style(client):
    r = await client.get("/v1/branding/signature", params={"style": "detailed"})
    assert r.status_code == 200
    assert "(212) 555-0100" in r.json()["html"]


@pytest.mark.asyncio
async def test_styles_catalogue(client):
    r = await client.get("/v1/branding/styles")
    assert [s["value"] for s in r.json()["header_styles"]] == ["minimal", "professional", "bold", "classic"]
