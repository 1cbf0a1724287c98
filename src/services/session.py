"""Current-document context shared between analysis and question answering."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


class NoDocumentContextError(RuntimeError):
    """Raised when a question arrives before any document was analyzed."""


@dataclass(frozen=True)
class DocumentContext:
    full_text: str
    filename: Optional[str]
    page_count: int
    analyzed_at: datetime


class DocumentSession:
    """Single-slot holder for the most recently analyzed document.

    Each successful analysis replaces the previous context wholesale; the
    slot is never cleared. The request layer owns one instance and hands it
    to the question-answering path explicitly.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current: Optional[DocumentContext] = None

    def replace(
        self, full_text: str, *, filename: str | None = None, page_count: int = 0
    ) -> DocumentContext:
        context = DocumentContext(
            full_text=full_text,
            filename=filename,
            page_count=page_count,
            analyzed_at=datetime.now(timezone.utc),
        )
        with self._lock:
            self._current = context
        return context

    @property
    def current(self) -> Optional[DocumentContext]:
        with self._lock:
            return self._current

    @property
    def has_context(self) -> bool:
        current = self.current
        return current is not None and bool(current.full_text)

    def require_context(self) -> DocumentContext:
        current = self.current
        if current is None or not current.full_text:
            raise NoDocumentContextError(
                "No document analyzed yet. Please upload a document first."
            )
        return current


__all__ = ["DocumentContext", "DocumentSession", "NoDocumentContextError"]
