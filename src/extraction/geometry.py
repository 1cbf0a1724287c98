"""Line-geometry index used to recover bounding polygons for text blocks."""

from __future__ import annotations

import logging
from typing import Dict, List, Literal, Optional, Tuple

from extraction import raw
from schemas.internal.documents import GeometryEntry

logger = logging.getLogger(__name__)

MIN_POLYGON_COORDS = 8

PrefixMatch = Literal["first", "longest"]


def flatten_polygon(polygon: object) -> Optional[List[float]]:
    """Normalize a polygon to ``[x1, y1, x2, y2, ...]``.

    Accepts an already-flat numeric sequence or a sequence of points exposing
    ``x``/``y`` (mapping keys or attributes). Any other shape yields None.
    """
    if not isinstance(polygon, (list, tuple)) or not polygon:
        return None

    if all(raw.is_number(value) for value in polygon):
        return list(polygon)

    flat: List[float] = []
    for point in polygon:
        x = raw.get_field(point, "x")
        y = raw.get_field(point, "y")
        if not (raw.is_number(x) and raw.is_number(y)):
            return None
        flat.extend((x, y))
    return flat


def usable_polygon(polygon: object) -> Optional[List[float]]:
    """Flatten and drop polygons with fewer than four corner points."""
    flat = flatten_polygon(polygon)
    if flat is None or len(flat) < MIN_POLYGON_COORDS:
        return None
    return flat


def format_region(page_number: int, polygon: List[float]) -> str:
    """Encode one region as ``D(page,x1,y1,x2,y2,x3,y3,x4,y4)``."""
    coords = ",".join(_format_number(value) for value in polygon[:MIN_POLYGON_COORDS])
    return f"D({page_number},{coords})"


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class GeometryIndex:
    """Maps ``(page, trimmed line text)`` to the first-seen line polygon."""

    def __init__(self, *, prefix_match: PrefixMatch = "first") -> None:
        self.prefix_match = prefix_match
        self._entries: Dict[Tuple[int, str], GeometryEntry] = {}
        # insertion-ordered keys per page, scanned by the prefix fallback
        self._page_texts: Dict[int, List[str]] = {}

    @classmethod
    def build(
        cls, result: object, *, prefix_match: PrefixMatch = "first"
    ) -> "GeometryIndex":
        index = cls(prefix_match=prefix_match)
        skipped = 0
        for page in raw.pages(result):
            page_number = raw.get_page_number(page)
            if page_number is None:
                continue
            for line in raw.lines(page):
                polygon = usable_polygon(raw.get_field(line, "polygon"))
                if polygon is None:
                    skipped += 1
                    continue
                index.add(page_number, raw.get_text(line), polygon)
        logger.debug(
            "Geometry index built: %d entries, %d lines without usable polygon",
            len(index),
            skipped,
        )
        return index

    def add(self, page_number: int, text: str, polygon: List[float]) -> bool:
        """Insert an entry unless the key is already present."""
        key = (page_number, text.strip())
        if key in self._entries or len(polygon) < MIN_POLYGON_COORDS:
            return False
        self._entries[key] = GeometryEntry(page=page_number, polygon=polygon)
        self._page_texts.setdefault(page_number, []).append(key[1])
        return True

    def lookup(self, content: str, page_number: int) -> Optional[GeometryEntry]:
        """Resolve geometry for ``content`` on ``page_number``.

        Order: exact trimmed match, trimmed first line, then a prefix scan over
        the page's lines. The scan returns the first line in insertion order
        whose text prefixes the content, or the longest such line when the
        index was built with ``prefix_match="longest"``.
        """
        trimmed = content.strip()
        entry = self._entries.get((page_number, trimmed))
        if entry is not None:
            return entry

        if "\n" in content:
            first_line = content.split("\n", 1)[0].strip()
            entry = self._entries.get((page_number, first_line))
            if entry is not None:
                return entry

        matches = self._prefix_matches(trimmed, page_number)
        if self.prefix_match == "longest":
            best = max(matches, key=len, default=None)
        else:
            best = matches[0] if matches else None
        if best is None:
            return None
        return self._entries[(page_number, best)]

    def _prefix_matches(self, trimmed: str, page_number: int) -> List[str]:
        # empty line text would prefix everything
        return [
            text
            for text in self._page_texts.get(page_number, [])
            if text and trimmed.startswith(text)
        ]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


def build_geometry_index(
    result: object, *, prefix_match: PrefixMatch = "first"
) -> GeometryIndex:
    return GeometryIndex.build(result, prefix_match=prefix_match)


__all__ = [
    "GeometryIndex",
    "MIN_POLYGON_COORDS",
    "build_geometry_index",
    "flatten_polygon",
    "format_region",
    "usable_polygon",
]
