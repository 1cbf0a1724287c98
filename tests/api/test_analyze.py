from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_session
from api.main import app
from services.session import DocumentSession

client = TestClient(app)


@pytest.fixture
def session():
    session = DocumentSession()
    app.dependency_overrides[get_session] = lambda: session
    yield session
    app.dependency_overrides.pop(get_session, None)


def test_analyze_returns_structured_content(session, layout_result, tmp_path):
    with patch("services.contract_runner.analyze_document") as mock_analyze:
        mock_analyze.return_value = layout_result

        response = client.post(
            "/api/analyze",
            files={"document": ("msa.pdf", b"%PDF-1.7 dummy", "application/pdf")},
        )

    assert response.status_code == 200
    body = response.json()
    assert body["filename"] == "msa.pdf"
    assert body["filePath"].startswith("/uploads/")
    assert body["filePath"].endswith("-msa.pdf")
    assert body["content"]["pageCount"] == 2
    assert [item["type"] for item in body["content"]["items"]] == [
        "heading",
        "heading",
        "paragraph",
        "heading",
    ]
    assert body["content"]["items"][0]["source"] == "D(1,1,1,2,1,2,2,1,2)"
    mock_analyze.assert_called_once_with(b"%PDF-1.7 dummy")

    stored = tmp_path / "uploads" / Path(body["filePath"]).name
    assert stored.read_bytes() == b"%PDF-1.7 dummy"
    assert session.require_context().full_text == body["content"]["fullText"]


def test_analyze_without_file(session):
    response = client.post("/api/analyze")
    assert response.status_code == 400
    assert response.json()["error"] == "No file uploaded"


def test_analyze_rejects_non_pdf(session):
    response = client.post(
        "/api/analyze",
        files={"document": ("notes.txt", b"hello", "text/plain")},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Only PDF files are allowed"


def test_analyze_rejects_empty_file(session):
    response = client.post(
        "/api/analyze",
        files={"document": ("empty.pdf", b"", "application/pdf")},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Uploaded file is empty"


def test_analyze_service_failure_keeps_previous_context(session):
    session.replace("earlier contract text")

    with patch("services.contract_runner.analyze_document") as mock_analyze:
        mock_analyze.side_effect = RuntimeError("quota exceeded")

        response = client.post(
            "/api/analyze",
            files={"document": ("msa.pdf", b"%PDF", "application/pdf")},
        )

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Failed to analyze document"
    assert body["details"] == "quota exceeded"
    assert session.require_context().full_text == "earlier contract text"
