"""Service-layer helpers for stored uploads."""

from __future__ import annotations

import time
from pathlib import Path

PDF_CONTENT_TYPE = "application/pdf"


def is_pdf_upload(filename: str | None, content_type: str | None) -> bool:
    """Accept uploads declared as PDF, or named ``*.pdf`` when untyped."""
    if content_type == PDF_CONTENT_TYPE:
        return True
    if content_type and content_type != "application/octet-stream":
        return False
    return bool(filename) and filename.lower().endswith(".pdf")


def store_upload(data: bytes, filename: str | None, upload_dir: str | Path) -> Path:
    """Persist upload bytes as ``<epoch-ms>-<original name>`` and return the path."""
    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)
    original = Path(filename or "document.pdf").name or "document.pdf"
    path = directory / f"{int(time.time() * 1000)}-{original}"
    path.write_bytes(data)
    return path


def resolve_upload(filename: str, upload_dir: str | Path) -> Path:
    """Map a stored upload name back to its path inside ``upload_dir``."""
    directory = Path(upload_dir).resolve()
    candidate = (directory / filename).resolve()
    if candidate.parent != directory or not candidate.is_file():
        raise FileNotFoundError(filename)
    return candidate


__all__ = ["PDF_CONTENT_TYPE", "is_pdf_upload", "resolve_upload", "store_upload"]
