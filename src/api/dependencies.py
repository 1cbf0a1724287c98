"""Request-scoped dependencies."""

from __future__ import annotations

from fastapi import Request

from services.session import DocumentSession


def get_session(request: Request) -> DocumentSession:
    """Return the document session owned by the running application."""
    session = getattr(request.app.state, "session", None)
    if session is None:
        session = DocumentSession()
        request.app.state.session = session
    return session


__all__ = ["get_session"]
