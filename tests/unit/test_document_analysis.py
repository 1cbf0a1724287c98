from __future__ import annotations

import pytest

from services.document_analysis import (
    DocumentAnalysisConfig,
    DocumentAnalysisError,
    analyze_document,
)
from core.config import Settings


class _Poller:
    def __init__(self, result):
        self._result = result
        self.timeout = "unset"

    def result(self, timeout=None):
        self.timeout = timeout
        return self._result


class _Client:
    def __init__(self, result):
        self.calls = []
        self.poller = _Poller(result)

    def begin_analyze_document(self, model_id, body, **kwargs):
        self.calls.append((model_id, body))
        return self.poller


class _SdkResult:
    def __init__(self, payload):
        self._payload = payload

    def as_dict(self):
        return self._payload


def test_analyze_document_returns_as_dict_payload() -> None:
    payload = {"pages": [{"pageNumber": 1, "lines": []}], "paragraphs": []}
    client = _Client(_SdkResult(payload))
    config = DocumentAnalysisConfig(endpoint=None, api_key=None, model_id="prebuilt-layout", timeout=30)

    result = analyze_document(b"%PDF-1.7", client=client, config=config)

    assert result == payload
    model_id, body = client.calls[0]
    assert model_id == "prebuilt-layout"
    assert body.bytes_source == b"%PDF-1.7"
    assert client.poller.timeout == 30


def test_analyze_document_accepts_mapping_results() -> None:
    client = _Client({"pages": []})
    config = DocumentAnalysisConfig(endpoint=None, api_key=None)

    assert analyze_document(b"%PDF", client=client, config=config) == {"pages": []}


def test_analyze_document_rejects_unknown_result_type() -> None:
    client = _Client(object())
    config = DocumentAnalysisConfig(endpoint=None, api_key=None)

    with pytest.raises(DocumentAnalysisError, match="Unexpected analysis result type"):
        analyze_document(b"%PDF", client=client, config=config)


def test_service_errors_propagate() -> None:
    class _FailingClient:
        def begin_analyze_document(self, model_id, body, **kwargs):
            raise RuntimeError("service unavailable")

    config = DocumentAnalysisConfig(endpoint=None, api_key=None)
    with pytest.raises(RuntimeError, match="service unavailable"):
        analyze_document(b"%PDF", client=_FailingClient(), config=config)


def test_missing_credentials_fail_before_calling_service() -> None:
    config = DocumentAnalysisConfig(endpoint="https://example.cognitiveservices.azure.com", api_key=None)

    with pytest.raises(DocumentAnalysisError, match="AZURE_DOCUMENT_INTELLIGENCE_KEY"):
        analyze_document(b"%PDF", config=config)


def test_config_from_settings_unwraps_secret() -> None:
    settings = Settings(
        azure_document_intelligence_endpoint="https://di.example.com",
        azure_document_intelligence_key="secret-key",
        document_model_id="prebuilt-read",
        document_analysis_timeout=12.5,
    )

    config = DocumentAnalysisConfig.from_settings(settings)

    assert config.endpoint == "https://di.example.com"
    assert config.api_key == "secret-key"
    assert config.model_id == "prebuilt-read"
    assert config.timeout == 12.5
