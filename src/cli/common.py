"""Shared helpers for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer

from schemas.internal.documents import StructuredContent


def json_dumps(payload: object) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


def emit_json(data: Any) -> None:
    typer.echo(json_dumps(data))


def load_analysis_payload(path: Path) -> dict[str, Any]:
    """Read a saved analysis result (``AnalyzeResult.as_dict()`` JSON)."""
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON in {path}: {exc}") from exc
    if isinstance(payload, dict) and isinstance(payload.get("analyzeResult"), dict):
        # raw REST envelope
        payload = payload["analyzeResult"]
    if not isinstance(payload, dict):
        raise typer.BadParameter(f"Expected a JSON object in {path}")
    return payload


def preview(text: str, limit: int = 100) -> str:
    collapsed = " ".join(text.split())
    if len(collapsed) <= limit:
        return collapsed
    return collapsed[: limit - 3] + "..."


def print_summary(content: StructuredContent, *, show_items: int = 20) -> None:
    lines = [
        f"Pages: {content.page_count}",
        f"Items: {len(content.items)} ({content.heading_count} headings)",
        f"Full text characters: {len(content.full_text)}",
    ]
    selected = content.items[:show_items] if show_items > 0 else []
    if selected:
        lines.append("")
    for item in selected:
        marker = "#" if item.type == "heading" else "-"
        lines.append(f"{marker} [p{item.page}] {item.id}: {preview(item.content)}")
    if len(content.items) > len(selected) and selected:
        lines.append(f"... {len(content.items) - len(selected)} more")
    typer.echo("\n".join(lines))


def dump_content(content: StructuredContent) -> dict[str, Any]:
    return content.model_dump(by_alias=True)


__all__ = [
    "dump_content",
    "emit_json",
    "json_dumps",
    "load_analysis_payload",
    "preview",
    "print_summary",
]
