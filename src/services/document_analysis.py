"""Layout analysis through Azure AI Document Intelligence."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from azure.ai.documentintelligence import DocumentIntelligenceClient
from azure.ai.documentintelligence.models import AnalyzeDocumentRequest
from azure.core.credentials import AzureKeyCredential

from core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class DocumentAnalysisError(RuntimeError):
    """Raised when the analysis service cannot be used as configured."""


class AnalysisClientLike(Protocol):
    def begin_analyze_document(self, model_id: str, body: Any, **kwargs: Any) -> Any: ...


@dataclass(frozen=True)
class DocumentAnalysisConfig:
    endpoint: str | None
    api_key: str | None
    model_id: str = "prebuilt-layout"
    timeout: float | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "DocumentAnalysisConfig":
        settings = settings or get_settings()
        key = settings.azure_document_intelligence_key
        return cls(
            endpoint=settings.azure_document_intelligence_endpoint,
            api_key=key.get_secret_value() if key is not None else None,
            model_id=settings.document_model_id,
            timeout=settings.document_analysis_timeout,
        )


def analyze_document(
    data: bytes,
    *,
    client: AnalysisClientLike | None = None,
    config: DocumentAnalysisConfig | None = None,
) -> dict[str, Any]:
    """Run layout analysis on PDF bytes and return the result as a mapping.

    Service errors propagate unchanged; this layer does not retry.
    """
    config = config or DocumentAnalysisConfig.from_settings()
    analysis_client = client if client is not None else _build_client(config)

    logger.info("Analyzing document (%d bytes) with %s", len(data), config.model_id)
    poller = analysis_client.begin_analyze_document(
        config.model_id, AnalyzeDocumentRequest(bytes_source=data)
    )
    result = poller.result(timeout=config.timeout)
    payload = _to_mapping(result)
    logger.info(
        "Analysis finished: %d pages, %d paragraphs",
        len(payload.get("pages") or []),
        len(payload.get("paragraphs") or []),
    )
    return payload


def _build_client(config: DocumentAnalysisConfig) -> DocumentIntelligenceClient:
    if not config.endpoint or not config.api_key:
        raise DocumentAnalysisError(
            "AZURE_DOCUMENT_INTELLIGENCE_ENDPOINT and AZURE_DOCUMENT_INTELLIGENCE_KEY must be set."
        )
    return DocumentIntelligenceClient(
        endpoint=config.endpoint, credential=AzureKeyCredential(config.api_key)
    )


def _to_mapping(result: object) -> dict[str, Any]:
    as_dict = getattr(result, "as_dict", None)
    if callable(as_dict):
        return as_dict()
    if isinstance(result, Mapping):
        return dict(result)
    raise DocumentAnalysisError(
        f"Unexpected analysis result type: {type(result).__name__}"
    )


__all__ = [
    "AnalysisClientLike",
    "DocumentAnalysisConfig",
    "DocumentAnalysisError",
    "analyze_document",
]
