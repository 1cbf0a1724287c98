"""Internal schema definitions."""

from .documents import (  # noqa: F401
    ContentItem,
    ContentType,
    GeometryEntry,
    StructuredContent,
)

__all__ = ["ContentItem", "ContentType", "GeometryEntry", "StructuredContent"]
