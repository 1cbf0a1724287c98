"""Assemble classified, geometry-annotated content from an analysis result."""

from __future__ import annotations

import logging
from typing import List, Optional

from extraction import raw
from extraction.classifier import classify
from extraction.geometry import (
    GeometryIndex,
    PrefixMatch,
    build_geometry_index,
    format_region,
    usable_polygon,
)
from schemas.internal.documents import ContentItem, StructuredContent

logger = logging.getLogger(__name__)

PARAGRAPH_SEPARATOR = "\n\n"
LINE_SEPARATOR = "\n"
DEFAULT_PAGE = 1


def assemble(result: object, geometry_index: GeometryIndex) -> StructuredContent:
    """Build ordered items and full text from a raw analysis result.

    Paragraphs are used when present; otherwise every page line becomes an
    item. Missing or malformed structure degrades to defaults.
    """
    paragraphs = raw.paragraphs(result)
    pages = raw.pages(result)

    if paragraphs:
        items, full_text = _assemble_paragraphs(paragraphs, geometry_index)
    else:
        items, full_text = _assemble_lines(pages)

    content = StructuredContent(items=items, full_text=full_text, page_count=len(pages))
    logger.debug(
        "Assembled %d items (%d headings) from %s, %d pages",
        len(content.items),
        content.heading_count,
        "paragraphs" if paragraphs else "lines",
        content.page_count,
    )
    return content


def extract_structured_content(
    result: object, *, prefix_match: PrefixMatch = "first"
) -> StructuredContent:
    """Build the geometry index for ``result`` and assemble its content."""
    index = build_geometry_index(result, prefix_match=prefix_match)
    return assemble(result, index)


def _assemble_paragraphs(
    paragraphs: List[object], geometry_index: GeometryIndex
) -> tuple[List[ContentItem], str]:
    items: List[ContentItem] = []
    parts: List[str] = []

    for index, paragraph in enumerate(paragraphs):
        content = raw.get_text(paragraph)
        role = raw.get_field(paragraph, "role")
        regions = raw.bounding_regions(paragraph)
        first_region = regions[0] if regions else None

        page = raw.get_page_number(first_region) or DEFAULT_PAGE
        bounding_box = usable_polygon(raw.get_field(first_region, "polygon"))
        if bounding_box is None:
            entry = geometry_index.lookup(content, page)
            bounding_box = list(entry.polygon) if entry is not None else []

        parts.append(content + PARAGRAPH_SEPARATOR)
        items.append(
            ContentItem(
                id=f"item-{index}",
                type=classify(content, role if isinstance(role, str) else None),
                content=content,
                page=page,
                bounding_box=bounding_box,
                source=_regions_source(regions),
            )
        )

    return items, "".join(parts)


def _assemble_lines(pages: List[object]) -> tuple[List[ContentItem], str]:
    items: List[ContentItem] = []
    parts: List[str] = []

    for page_index, page in enumerate(pages):
        page_number = raw.get_page_number(page) or DEFAULT_PAGE
        for line_index, line in enumerate(raw.lines(page)):
            content = raw.get_text(line)
            polygon = usable_polygon(raw.get_field(line, "polygon"))

            parts.append(content + LINE_SEPARATOR)
            items.append(
                ContentItem(
                    id=f"page-{page_index}-line-{line_index}",
                    type=classify(content),
                    content=content,
                    page=page_number,
                    bounding_box=polygon or [],
                    source=format_region(page_number, polygon) if polygon else None,
                )
            )

    return items, "".join(parts)


def _regions_source(regions: List[object]) -> Optional[str]:
    encoded: List[str] = []
    for region in regions:
        page_number = raw.get_page_number(region)
        polygon = usable_polygon(raw.get_field(region, "polygon"))
        if page_number is None or polygon is None:
            continue
        encoded.append(format_region(page_number, polygon))
    return ";".join(encoded) or None


__all__ = [
    "LINE_SEPARATOR",
    "PARAGRAPH_SEPARATOR",
    "assemble",
    "extract_structured_content",
]
