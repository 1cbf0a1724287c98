"""Configuration inspection commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer

from core.config import Settings, get_settings
from cli.common import emit_json, json_dumps


app = typer.Typer(
    help="Inspect and export configuration",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
    no_args_is_help=True,
)


@app.command("show", help="Show the effective configuration")
def show_config(
    json_out: bool = typer.Option(True, "--json/--no-json", help="Emit JSON"),
) -> None:
    payload = _redacted(get_settings())
    if json_out:
        emit_json(payload)
        return
    for key, value in payload.items():
        typer.echo(f"{key}={value}")


@app.command("export", help="Export configuration as JSON")
def export_config(
    output: Path | None = typer.Option(
        None,
        "--output",
        help="Target JSON file (defaults to stdout)",
    ),
) -> None:
    payload = _redacted(get_settings())
    if output is None:
        emit_json(payload)
        return
    output.write_text(json_dumps(payload), encoding="utf-8")
    typer.echo(f"Written: {output}")


@app.command("diff", help="Show values that differ from the defaults")
def diff_config() -> None:
    defaults = _settings_defaults()
    current = _redacted(get_settings())
    diff: dict[str, dict[str, Any]] = {}
    for key, value in current.items():
        default = defaults.get(key)
        if value != default:
            diff[key] = {"value": value, "default": default}
    emit_json(diff)


def _redacted(settings: Settings) -> dict[str, Any]:
    # SecretStr dumps as a masked string in json mode
    return settings.model_dump(mode="json")


def _settings_defaults() -> dict[str, Any]:
    defaults: dict[str, Any] = {}
    for name, field in Settings.model_fields.items():
        defaults[name] = field.get_default(call_default_factory=True)
    return defaults


__all__ = ["app"]
