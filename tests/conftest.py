from __future__ import annotations

import pytest

from core.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    # keep uploads and cached settings per test
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path / "uploads"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def square(x: float, y: float, size: float = 1.0) -> list[float]:
    return [x, y, x + size, y, x + size, y + size, x, y + size]


@pytest.fixture
def layout_result() -> dict:
    """A small prebuilt-layout result in ``as_dict()`` shape."""
    return {
        "pages": [
            {
                "pageNumber": 1,
                "lines": [
                    {"content": "MASTER SERVICES AGREEMENT", "polygon": square(1, 1)},
                    {"content": "1. Definitions", "polygon": square(1, 2)},
                    {"content": "Capitalized terms have the meanings below.", "polygon": square(1, 3)},
                ],
            },
            {
                "pageNumber": 2,
                "lines": [
                    {"content": "Payment Terms:", "polygon": square(1, 1)},
                ],
            },
        ],
        "paragraphs": [
            {
                "content": "MASTER SERVICES AGREEMENT",
                "role": "title",
                "boundingRegions": [{"pageNumber": 1, "polygon": square(1, 1)}],
            },
            {
                "content": "1. Definitions",
                "role": "sectionHeading",
                "boundingRegions": [{"pageNumber": 1, "polygon": square(1, 2)}],
            },
            {
                "content": "Capitalized terms have the meanings below.",
                "boundingRegions": [{"pageNumber": 1, "polygon": square(1, 3)}],
            },
            {
                "content": "Payment Terms:",
                "boundingRegions": [{"pageNumber": 2, "polygon": square(1, 1)}],
            },
        ],
    }
