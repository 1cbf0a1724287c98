from fastapi.testclient import TestClient

from api.main import app
from services.io import store_upload

client = TestClient(app)


def test_serves_stored_upload(tmp_path):
    stored = store_upload(b"%PDF-1.7 body", "lease.pdf", tmp_path / "uploads")

    response = client.get(f"/uploads/{stored.name}")

    assert response.status_code == 200
    assert response.content == b"%PDF-1.7 body"
    assert response.headers["content-type"] == "application/pdf"


def test_missing_upload_is_404():
    response = client.get("/uploads/does-not-exist.pdf")

    assert response.status_code == 404
    assert response.json()["error"] == "File not found"


def test_unknown_route_keeps_default_error_body():
    response = client.get("/no-such-route")

    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}
