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


def test_query_answers_with_document_context(session):
    session.replace("TERM\n\nThe term is five years.\n\n", filename="msa.pdf")

    with patch("api.actions.query.answer_question") as mock_answer:
        mock_answer.return_value = "The term is five years."

        response = client.post("/api/query", json={"question": "  What is the term? "})

    assert response.status_code == 200
    assert response.json() == {"answer": "The term is five years."}
    mock_answer.assert_called_once_with(
        "What is the term?", "TERM\n\nThe term is five years.\n\n"
    )


@pytest.mark.parametrize("payload", [{}, {"question": ""}, {"question": "   "}])
def test_query_requires_question(session, payload):
    session.replace("some text")

    response = client.post("/api/query", json=payload)

    assert response.status_code == 400
    assert response.json()["error"] == "Question is required"


def test_query_before_any_analysis(session):
    with patch("api.actions.query.answer_question") as mock_answer:
        response = client.post("/api/query", json={"question": "What is the term?"})

    assert response.status_code == 400
    assert response.json() == {
        "error": "No document analyzed yet. Please upload a document first."
    }
    mock_answer.assert_not_called()


def test_query_model_failure(session):
    session.replace("some text")

    with patch("api.actions.query.answer_question") as mock_answer:
        mock_answer.side_effect = TimeoutError("model timed out")

        response = client.post("/api/query", json={"question": "What is the term?"})

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Failed to process query"
    assert body["details"] == "model timed out"
