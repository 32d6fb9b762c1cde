"""Template CRUD and send-time render over the HTTP surface, without MongoDB."""

from datetime import datetime

import pytest

from studiomail.services import templates as templates_service

pytestmark = pytest.mark.asyncio

TEMPLATE_ID = "65f" + "0" * 20 + "9"


class StoredTemplate:
    """In-memory stand-in for an EmailTemplate document."""

    def __init__(self, **fields):
        self.id = None
        self.name = ""
        self.subject = ""
        self.blocks = []
        self.include_header = False
        self.header_style = None
        self.include_signature = False
        self.signature_style = None
        self.include_hero_image = False
        self.hero_image_url = None
        self.html_body = ""
        self.text_body = ""
        self.created_at = datetime(2026, 1, 1)
        self.updated_at = datetime(2026, 1, 1)
        self.saved = 0
        self.deleted = False
        for key, value in fields.items():
            setattr(self, key, value)

    async def insert(self):
        self.id = TEMPLATE_ID

    async def save(self):
        self.saved += 1

    async def delete(self):
        self.deleted = True


@pytest.fixture
def audit_events(monkeypatch):
    events = []

    async def record(photographer_id, event_type, entity_type, entity_id=None, metadata=None):
        events.append(event_type)

    monkeypatch.setattr(templates_service, "log_event", record)
    return events


@pytest.fixture
def stored(monkeypatch, audit_events):
    template = StoredTemplate(
        id=TEMPLATE_ID,
        name="Welcome",
        subject="Hello {{first_name}}",
        blocks=[
            {"id": "h", "type": "HEADING", "content": {"text": "Hi {{first_name}}"}},
            {"id": "b", "type": "BUTTON", "content": {"text": "View Gallery", "linkType": "GALLERY", "linkValue": "g1"}},
        ],
        include_signature=True,
        signature_style="simple",
    )

    async def get_template(template_id, photographer_id):
        return template if str(template_id) == TEMPLATE_ID else None

    monkeypatch.setattr(templates_service, "get_template", get_template)
    return template


async def test_create_caches_bodies_with_tokens(client, monkeypatch, audit_events):
    monkeypatch.setattr(templates_service, "EmailTemplate", StoredTemplate)
    body = {
        "name": "Gallery delivery",
        "subject": "Your photos, {{first_name}}",
        "blocks": [
            {"id": "b", "type": "BUTTON", "content": {"text": "Open", "linkType": "GALLERY", "linkValue": "g1"}},
        ],
    }
    r = await client.post("/v1/templates", json=body)
    assert r.status_code == 200
    data = r.json()
    assert data["id"] == TEMPLATE_ID
    assert data["name"] == "Gallery delivery"
    assert 'href="{{gallery_link}}"' in data["html_body"]
    assert data["html_body"].startswith("<!DOCTYPE html>")
    assert "{{gallery_link}}" in data["text_body"]
    assert data["document"]["subject"] == "Your photos, {{first_name}}"
    assert audit_events == ["template_created"]


async def test_create_requires_name(client):
    r = await client.post("/v1/templates", json={"name": "", "blocks": []})
    assert r.status_code == 422


async def test_get_returns_camel_case_document(client, stored):
    r = await client.get(f"/v1/templates/{TEMPLATE_ID}")
    assert r.status_code == 200
    document = r.json()["document"]
    assert document["includeSignature"] is True
    assert document["blocks"][1]["content"]["linkType"] == "GALLERY"


async def test_get_unknown_template(client, stored):
    r = await client.get("/v1/templates/" + "65f" + "0" * 21)
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"


async def test_list_page(client, stored, monkeypatch):
    async def list_templates(photographer_id, limit, offset):
        return [stored], 1

    monkeypatch.setattr(templates_service, "list_templates", list_templates)
    r = await client.get("/v1/templates", params={"limit": 500})
    assert r.status_code == 200
    data = r.json()
    assert data["limit"] == 100
    assert data["total"] == 1
    assert data["has_more"] is False
    assert data["items"][0]["name"] == "Welcome"


async def test_rename_keeps_document(client, stored, audit_events):
    r = await client.put(f"/v1/templates/{TEMPLATE_ID}", json={"name": "renamed"})
    assert r.status_code == 200
    assert stored.name == "renamed"
    assert stored.subject == "Hello {{first_name}}"
    assert [b["id"] for b in stored.blocks] == ["h", "b"]
    assert stored.include_signature is True
    assert "Hi {{first_name}}" in stored.html_body
    assert stored.saved == 1
    assert audit_events == ["template_updated"]


async def test_update_replaces_only_sent_fields(client, stored):
    blocks = [{"id": "t", "type": "TEXT", "content": {"text": "New body"}}]
    r = await client.put(f"/v1/templates/{TEMPLATE_ID}", json={"blocks": blocks, "includeHeader": True})
    assert r.status_code == 200
    assert stored.name == "Welcome"
    assert stored.subject == "Hello {{first_name}}"
    assert stored.blocks == blocks
    assert stored.include_header is True
    assert "New body" in stored.html_body
    assert "View Gallery" not in stored.html_body


async def test_delete(client, stored, audit_events):
    r = await client.delete(f"/v1/templates/{TEMPLATE_ID}")
    assert r.status_code == 200
    assert r.json() == {"status": "deleted"}
    assert stored.deleted is True
    assert audit_events == ["template_deleted"]


async def test_send_render_substitutes_variables(client, stored, photographer):
    photographer.phone = None
    r = await client.post(f"/v1/templates/{TEMPLATE_ID}/render", json={"variables": {"first_name": "Sam"}})
    assert r.status_code == 200
    data = r.json()
    assert data["subject"] == "Hello Sam"
    assert "Hi Sam" in data["html_body"]
    assert "Hi Sam" in data["text_body"]
    assert 'href="{{gallery_link}}"' in data["html_body"]
    # Outbound renders never show the sample contact line.
    assert "(555) 123-4567" not in data["html_body"]
    assert "hello@example.com" not in data["html_body"]
    assert "jane@studio.test" in data["html_body"]


async def test_send_render_unknown_template(client, stored):
    r = await client.post("/v1/templates/" + "65f" + "0" * 21 + "/render", json={})
    assert r.status_code == 404
