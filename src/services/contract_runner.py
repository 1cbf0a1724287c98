"""Analyze-then-extract runner shared by the CLI and the API."""

from __future__ import annotations

import logging
from pathlib import Path
from time import perf_counter
from typing import Any, Mapping

from core.config import Settings, get_settings
from extraction import extract_structured_content
from schemas.requests import ContractInput
from schemas.responses import AnalysisRunResult
from services.document_analysis import analyze_document
from services.io import store_upload
from services.session import DocumentSession

logger = logging.getLogger(__name__)


def run_analysis(
    input_data: ContractInput | Mapping[str, Any],
    *,
    session: DocumentSession | None = None,
    store: bool = False,
    settings: Settings | None = None,
) -> AnalysisRunResult:
    """Analyze a PDF, extract its structured content and refresh ``session``.

    Analysis failures propagate unchanged; the session is only replaced after
    a successful extraction.
    """
    input_obj = (
        input_data
        if isinstance(input_data, ContractInput)
        else ContractInput.model_validate(input_data)
    )
    settings = settings or get_settings()
    start = perf_counter()
    warnings: list[str] = []

    if input_obj.pdf_bytes is not None:
        data = input_obj.pdf_bytes
        filename = input_obj.filename
        stored_path = (
            str(store_upload(data, filename, settings.upload_dir)) if store else None
        )
    else:
        path = Path(str(input_obj.pdf_path))
        data = path.read_bytes()
        filename = input_obj.filename or path.name
        stored_path = str(path)

    payload = analyze_document(data)
    content = extract_structured_content(
        payload, prefix_match=settings.geometry_prefix_match
    )
    if not content.items:
        warnings.append("No text content was recognized in the document.")

    if session is not None:
        session.replace(content.full_text, filename=filename, page_count=content.page_count)

    runtime_ms = int((perf_counter() - start) * 1000)
    logger.info(
        "Extracted %d items from %s in %d ms", len(content.items), filename, runtime_ms
    )
    return AnalysisRunResult(
        filename=filename,
        stored_path=stored_path,
        content=content,
        runtime_ms=runtime_ms,
        warnings=warnings,
    )


__all__ = ["run_analysis"]
