"""Heading vs. paragraph classification from layout roles and text shape."""

from __future__ import annotations

import re
from typing import Callable, Optional, Tuple

from schemas.internal.documents import ContentType

HEADING_ROLES = frozenset({"title", "sectionHeading", "pageHeader"})

# Longer blocks are body text even when they look numbered or shouted.
MAX_HEADING_LENGTH = 150

ShapePredicate = Callable[[str], bool]


def _matches(pattern: str, flags: int = 0) -> ShapePredicate:
    # ASCII digits, whitespace and case folding only
    compiled = re.compile(pattern, flags | re.ASCII)
    return lambda content: compiled.match(content) is not None


# Evaluated in order; the first match decides.
HEADING_SHAPES: Tuple[Tuple[str, ShapePredicate], ...] = (
    ("all_caps", _matches(r"[A-Z][A-Z\s]+\Z")),
    ("numbered", _matches(r"\d+\.")),
    ("article", _matches(r"Article\s+[IVX\d]+", re.IGNORECASE)),
    ("section", _matches(r"Section\s+[\d.]+", re.IGNORECASE)),
    ("clause", _matches(r"Clause\s+[\d.]+", re.IGNORECASE)),
    ("colon_label", _matches(r"[A-Z][^.!?]*:\Z")),
)


def utf16_length(content: str) -> int:
    """Length in UTF-16 code units, so astral characters count twice."""
    return len(content.encode("utf-16-le", "surrogatepass")) // 2


def match_heading_shape(content: str) -> Optional[str]:
    """Return the name of the first heading shape ``content`` matches."""
    if utf16_length(content) >= MAX_HEADING_LENGTH:
        return None
    for name, predicate in HEADING_SHAPES:
        if predicate(content):
            return name
    return None


def classify(content: str, role: Optional[str] = None) -> ContentType:
    """Classify a text block; ambiguous blocks fall back to ``paragraph``."""
    if role in HEADING_ROLES:
        return "heading"
    if match_heading_shape(content) is not None:
        return "heading"
    return "paragraph"


__all__ = [
    "HEADING_ROLES",
    "HEADING_SHAPES",
    "MAX_HEADING_LENGTH",
    "classify",
    "match_heading_shape",
    "utf16_length",
]
