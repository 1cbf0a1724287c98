"""External request schemas for contract analysis and questions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ContractInput(BaseModel):
    pdf_path: str | None = None
    pdf_bytes: bytes | None = None
    filename: str | None = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _validate_source(self) -> "ContractInput":
        if bool(self.pdf_path) == bool(self.pdf_bytes):
            raise ValueError("Provide exactly one of pdf_path or pdf_bytes.")
        return self


class QueryRequest(BaseModel):
    question: str | None = Field(default=None, description="Free-form question.")

    model_config = ConfigDict(extra="ignore")


__all__ = ["ContractInput", "QueryRequest"]
