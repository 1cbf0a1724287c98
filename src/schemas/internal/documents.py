"""Document structure contracts for extraction output."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ContentType = Literal["heading", "paragraph"]


class _CamelModel(BaseModel):
    """Serialized with camelCase keys for the document viewer."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GeometryEntry(_CamelModel):
    """Line geometry resolved from the analysis result."""

    page: int
    polygon: List[float] = Field(min_length=8)


class ContentItem(_CamelModel):
    """A classified content block with its on-page geometry."""

    id: str = Field(description="Position-derived identifier, unique per run.")
    type: ContentType
    content: str
    page: int = 1
    bounding_box: List[float] = Field(default_factory=list)
    source: Optional[str] = Field(
        default=None,
        description="';'-joined D(page,x1,y1,x2,y2,x3,y3,x4,y4) regions.",
    )


class StructuredContent(_CamelModel):
    """Ordered content items plus the full text built alongside them."""

    items: List[ContentItem] = Field(default_factory=list)
    full_text: str = ""
    page_count: int = 0

    @property
    def heading_count(self) -> int:
        return sum(1 for item in self.items if item.type == "heading")


__all__ = ["ContentItem", "ContentType", "GeometryEntry", "StructuredContent"]
