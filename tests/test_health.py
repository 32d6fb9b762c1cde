from fastapi.testclient import TestClient

from studiomail.main import app


def test_health():
    # No context manager: startup would connect to MongoDB.
    c = TestClient(app)
    r = c.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}
    assert r.headers["X-Request-ID"]


def test_request_id_is_echoed():
    c = TestClient(app)
    r = c.get("/health", headers={"X-Request-ID": "req-123"})
    assert r.headers["X-Request-ID"] == "req-123"
