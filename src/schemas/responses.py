"""External response schemas for contract analysis and questions."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from schemas.internal.documents import StructuredContent


class AnalysisRunResult(BaseModel):
    filename: str | None = None
    stored_path: str | None = None
    content: StructuredContent
    runtime_ms: int | None = None
    warnings: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class AnalyzeResponse(BaseModel):
    """Payload returned to the document viewer after an upload."""

    filename: str | None = None
    file_path: str
    content: StructuredContent

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QueryResponse(BaseModel):
    answer: str


__all__ = ["AnalysisRunResult", "AnalyzeResponse", "QueryResponse"]
