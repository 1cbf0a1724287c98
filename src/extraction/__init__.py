"""Structured-content extraction from document-analysis results."""

from .assembler import assemble, extract_structured_content
from .classifier import classify, match_heading_shape
from .geometry import GeometryIndex, build_geometry_index, flatten_polygon

__all__ = [
    "GeometryIndex",
    "assemble",
    "build_geometry_index",
    "classify",
    "extract_structured_content",
    "flatten_polygon",
    "match_heading_shape",
]
