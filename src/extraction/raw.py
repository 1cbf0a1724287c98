"""Tolerant accessors over raw document-analysis payloads.

Analysis results arrive either as plain mappings (``AnalyzeResult.as_dict()``,
JSON files) with camelCase keys, or as SDK model objects exposing snake_case
attributes. Every accessor degrades to an empty/None value instead of raising.
"""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Real
from typing import Any, List, Optional, Sequence

_MISSING = object()


def get_field(obj: object, name: str, *aliases: str) -> Any:
    """Read ``name`` (or an alias) from a mapping or attribute-style object."""
    if obj is None:
        return None
    for key in (name, *aliases):
        if isinstance(obj, Mapping):
            value = obj.get(key, _MISSING)
        else:
            value = getattr(obj, key, _MISSING)
        if value is not _MISSING:
            return value
    return None


def get_sequence(obj: object, name: str, *aliases: str) -> List[Any]:
    """Read a list-like field; anything that is not a sequence becomes []."""
    value = get_field(obj, name, *aliases)
    if isinstance(value, (str, bytes, bytearray, Mapping)) or value is None:
        return []
    if isinstance(value, Sequence):
        return list(value)
    return []


def get_text(obj: object) -> str:
    value = get_field(obj, "content")
    return value if isinstance(value, str) else ""


def get_page_number(obj: object) -> Optional[int]:
    value = get_field(obj, "pageNumber", "page_number")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def pages(result: object) -> List[Any]:
    return get_sequence(result, "pages")


def lines(page: object) -> List[Any]:
    return get_sequence(page, "lines")


def paragraphs(result: object) -> List[Any]:
    return get_sequence(result, "paragraphs")


def bounding_regions(paragraph: object) -> List[Any]:
    return get_sequence(paragraph, "boundingRegions", "bounding_regions")


def is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


__all__ = [
    "bounding_regions",
    "get_field",
    "get_page_number",
    "get_sequence",
    "get_text",
    "is_number",
    "lines",
    "pages",
    "paragraphs",
]
